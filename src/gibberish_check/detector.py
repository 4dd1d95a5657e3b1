import logging
from collections.abc import Iterable, Iterator

from .config import DetectorConfig
from .dictionary import WordList, common_passwords, english_words
from .policy import WeightedSumPolicy
from .scoring import ScoreBundle, score_text

logger = logging.getLogger(__name__)


class GibberishDetector:
    """Binds a decision policy to its dictionary and password oracles."""

    def __init__(
        self,
        config: DetectorConfig | None = None,
        dictionary: WordList | None = None,
        passwords: WordList | None = None,
    ):
        self.config = config or DetectorConfig()
        self.policy = self.config.policy

        if dictionary is None:
            if self.config.dictionary_path is not None:
                dictionary = WordList.from_file(self.config.dictionary_path)
            else:
                dictionary = english_words()
        self.dictionary = dictionary

        if passwords is None:
            if self.config.passwords_path is not None:
                passwords = WordList.from_file(self.config.passwords_path)
            else:
                passwords = common_passwords()
        self.passwords = passwords

    def is_gibberish(self, text: str) -> bool:
        return self.policy.is_gibberish(text, self.dictionary)

    def looks_like_english(self, text: str) -> bool:
        return self.policy.looks_like_english(text, self.dictionary)

    def is_password(self, text: str) -> bool:
        return self.passwords.contains(text)

    def scores(self, text: str) -> ScoreBundle:
        """Score ``text`` the way the configured policy sees it."""
        if isinstance(self.policy, WeightedSumPolicy):
            return score_text(
                text,
                self.dictionary,
                keep_digits=False,
                min_word_length=self.policy.thresholds.min_word_length,
            )
        return score_text(text, self.dictionary)

    def filter_candidates(self, candidates: Iterable[str]) -> Iterator[str]:
        """Yield the candidates that are not gibberish, in input order."""
        kept = 0
        for candidate in candidates:
            if not self.is_gibberish(candidate):
                kept += 1
                yield candidate
        logger.debug("Kept %d candidates", kept)
