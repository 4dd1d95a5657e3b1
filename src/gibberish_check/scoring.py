"""Per-call score bundle shared by the decision policies and diagnostics."""

from pydantic import BaseModel

from . import stats
from .dictionary import WordList
from .ngrams import ngram_coverage, ngram_score, ngrams
from .normalize import control_char_ratio, normalize, tokens
from .tables import COMMON_BIGRAMS, COMMON_QUADGRAMS, COMMON_TRIGRAMS


class ScoreBundle(BaseModel):
    normalized: str
    token_count: int
    dictionary_words: int
    word_score: float
    bigram_score: float
    trigram_score: float
    quadgram_score: float
    trigram_count: int
    trigram_coverage: float
    letter_freq_score: float
    vowel_consonant_score: float
    repetition_ratio: float
    shift_pattern_ratio: float
    unique_token_ratio: float
    control_char_ratio: float


def score_text(
    text: str,
    dictionary: WordList,
    keep_digits: bool = True,
    min_word_length: int = 1,
) -> ScoreBundle:
    """Compute every signal for ``text`` in a single pass.

    Scores whose denominator would be zero are reported as 0.0.
    """
    normalized = normalize(text, keep_digits=keep_digits)
    words = tokens(normalized)
    trigrams = ngrams(normalized, 3, keep_digits=keep_digits)

    return ScoreBundle(
        normalized=normalized,
        token_count=len(words),
        dictionary_words=stats.dictionary_word_count(words, dictionary, min_word_length),
        word_score=stats.word_score(words, dictionary, min_word_length),
        bigram_score=ngram_score(
            ngrams(normalized, 2, keep_digits=keep_digits), COMMON_BIGRAMS
        ),
        trigram_score=ngram_score(trigrams, COMMON_TRIGRAMS),
        quadgram_score=ngram_score(
            ngrams(normalized, 4, keep_digits=keep_digits), COMMON_QUADGRAMS
        ),
        trigram_count=len(trigrams),
        trigram_coverage=ngram_coverage(trigrams, len(normalized)),
        letter_freq_score=stats.letter_frequency_score(text),
        vowel_consonant_score=stats.vowel_consonant_score(text),
        repetition_ratio=stats.repetition_ratio(text),
        shift_pattern_ratio=stats.shift_pattern_ratio(text),
        unique_token_ratio=stats.unique_token_ratio(words),
        control_char_ratio=control_char_ratio(text),
    )
