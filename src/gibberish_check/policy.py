"""Decision policies that turn scores into a gibberish verdict.

Two strategies share the same scorers:

* ``TieredPolicy`` weighs dictionary hits against n-gram support, with the
  amount of evidence required controlled by a ``Sensitivity`` level.
* ``WeightedSumPolicy`` folds every signal, including the statistical ones,
  into one weighted score. Its native answer is ``looks_like_english`` (True
  means English-like); ``is_gibberish`` is simply the negation.
"""

import logging
from enum import Enum
from typing import Annotated, Literal, assert_never

from pydantic import BaseModel, Field

from .dictionary import WordList
from .normalize import control_char_count, control_char_ratio, normalize
from .scoring import ScoreBundle, score_text
from .tables import ENGLISH_LETTERS

logger = logging.getLogger(__name__)

# Cleaned texts shorter than this are judged on dictionary membership alone.
SHORT_TEXT_LENGTH = 10


class Sensitivity(str, Enum):
    """How much evidence is needed before text counts as English.

    LOW defaults to gibberish unless nearly every word is in the dictionary.
    MEDIUM balances dictionary hits against n-gram support. HIGH accepts any
    dictionary word and only modest n-gram support.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


def _suspicious_trigrams(scores: ScoreBundle) -> bool:
    # Short alphanumeric fragments that happen to contain one common trigram.
    return (
        scores.trigram_count <= 3
        and scores.trigram_score > 0.3
        and scores.trigram_coverage < 0.3
        and scores.word_score < 0.1
    )


class TieredPolicy(BaseModel):
    kind: Literal["tiered"] = "tiered"
    sensitivity: Sensitivity = Sensitivity.MEDIUM

    def is_gibberish(self, text: str, dictionary: WordList) -> bool:
        cleaned = normalize(text)

        if not cleaned:
            logger.debug("Empty text")
            return True

        if len(cleaned) < SHORT_TEXT_LENGTH:
            logger.debug("Short text %r, dictionary lookup only", cleaned)
            return not dictionary.contains(cleaned)

        if control_char_count(text) > 0:
            logger.debug("Control characters present")
            return True

        scores = score_text(text, dictionary)
        if _suspicious_trigrams(scores):
            logger.debug("Suspicious trigram pattern")
            return True

        verdict = self.decide(scores)
        logger.debug(
            "%s: words=%d/%d trigram=%.3f quadgram=%.3f -> %s",
            self.sensitivity.value,
            scores.dictionary_words,
            scores.token_count,
            scores.trigram_score,
            scores.quadgram_score,
            "gibberish" if verdict else "english",
        )
        return verdict

    def looks_like_english(self, text: str, dictionary: WordList) -> bool:
        return not self.is_gibberish(text, dictionary)

    def decide(self, scores: ScoreBundle) -> bool:
        """Apply the sensitivity tier to precomputed scores."""
        words = scores.dictionary_words
        trigram = scores.trigram_score
        quadgram = scores.quadgram_score

        if self.sensitivity == Sensitivity.LOW:
            if scores.word_score > 0.8:
                return False
            elif words >= 3:
                return trigram <= 0.2 and quadgram <= 0.2
            elif words == 1:
                # Near-perfect n-gram support on a lone word looks templated
                if trigram > 0.8 or quadgram > 0.8:
                    return True
                return trigram <= 0.25 and quadgram <= 0.25
            else:
                return True
        elif self.sensitivity == Sensitivity.MEDIUM:
            if words >= 2:
                return False
            elif words == 1:
                return not (trigram > 0.15 or quadgram > 0.1)
            else:
                return not (trigram > 0.1 or quadgram > 0.05)
        elif self.sensitivity == Sensitivity.HIGH:
            if words >= 1:
                return False
            return not (trigram > 0.05 or quadgram > 0.03)
        else:
            assert_never(self.sensitivity)


class WeightedSumThresholds(BaseModel):
    control_ratio_limit: float = 0.8
    short_text_tokens: int = 2
    short_word_score: float = 0.3
    short_letter_freq_score: float = 0.5
    repetition_limit: float = 0.3
    shift_pattern_limit: float = 0.3
    unique_token_floor: float = 0.3
    repetition_penalty: float = 0.5
    min_word_length: int = 2

    bigram_weight: float = 0.20
    trigram_weight: float = 0.25
    quadgram_weight: float = 0.25
    letter_freq_weight: float = 0.15
    vowel_consonant_weight: float = 0.15
    word_weight: float = 0.20

    combined_threshold: float = 0.35
    min_word_score: float = 0.25


class WeightedSumPolicy(BaseModel):
    kind: Literal["weighted"] = "weighted"
    thresholds: WeightedSumThresholds = Field(default_factory=WeightedSumThresholds)

    def combined_score(self, scores: ScoreBundle) -> float:
        t = self.thresholds
        penalty = (
            t.repetition_penalty
            if scores.unique_token_ratio < t.unique_token_floor
            else 1.0
        )
        return penalty * (
            t.bigram_weight * scores.bigram_score
            + t.trigram_weight * scores.trigram_score
            + t.quadgram_weight * scores.quadgram_score
            + t.letter_freq_weight * scores.letter_freq_score
            + t.vowel_consonant_weight * scores.vowel_consonant_score
            + t.word_weight * scores.word_score
        )

    def looks_like_english(self, text: str, dictionary: WordList) -> bool:
        """Return True when ``text`` looks like structured English.

        Note the polarity: this is the opposite of ``is_gibberish``.
        """
        t = self.thresholds

        if not text:
            return False

        if control_char_ratio(text) > t.control_ratio_limit:
            logger.debug("Mostly control characters")
            return False

        if not any(ch in ENGLISH_LETTERS for ch in text):
            logger.debug("No English letters")
            return False

        scores = score_text(
            text, dictionary, keep_digits=False, min_word_length=t.min_word_length
        )

        if scores.token_count <= t.short_text_tokens:
            if len(text.strip()) <= 1:
                return False
            return (
                scores.word_score > t.short_word_score
                or scores.letter_freq_score > t.short_letter_freq_score
            )

        # Repetitive text is waved through rather than penalized.
        if (
            scores.repetition_ratio > t.repetition_limit
            or scores.shift_pattern_ratio > t.shift_pattern_limit
        ):
            logger.debug(
                "Repetition %.3f / shift pattern %.3f over limit",
                scores.repetition_ratio,
                scores.shift_pattern_ratio,
            )
            return True

        combined = self.combined_score(scores)
        logger.debug(
            "combined=%.3f word_score=%.3f", combined, scores.word_score
        )
        return combined >= t.combined_threshold and scores.word_score > t.min_word_score

    def is_gibberish(self, text: str, dictionary: WordList) -> bool:
        return not self.looks_like_english(text, dictionary)


Policy = Annotated[TieredPolicy | WeightedSumPolicy, Field(discriminator="kind")]
