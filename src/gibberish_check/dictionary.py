"""Membership oracles for dictionary words and common passwords.

Both oracles are plain exact-match sets. The bundled lists ship as package
data and are loaded once per process on first use.
"""

import logging
from collections.abc import Iterable, Iterator
from functools import lru_cache
from importlib import resources
from pathlib import Path

logger = logging.getLogger(__name__)

WORDS_RESOURCE = "words.txt"
PASSWORDS_RESOURCE = "passwords.txt"


def _parse_lines(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        entry = line.strip()
        if entry and not entry.startswith("#"):
            yield entry


class WordList:
    """Immutable exact-match set of strings."""

    def __init__(self, words: Iterable[str] = ()):
        self._words = frozenset(words)

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "WordList":
        return cls(_parse_lines(words))

    @classmethod
    def from_file(cls, path: Path) -> "WordList":
        """Load one entry per line, skipping blanks and ``#`` comments."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Word list not found: {path}")

        with open(path, encoding="utf-8") as f:
            word_list = cls(_parse_lines(f))
        logger.info("Loaded %d entries from %s", len(word_list), path)
        return word_list

    @classmethod
    def from_resource(cls, name: str) -> "WordList":
        resource = resources.files("gibberish_check") / "data" / name
        text = resource.read_text(encoding="utf-8")
        word_list = cls(_parse_lines(text.splitlines()))
        logger.debug("Loaded %d bundled entries from %s", len(word_list), name)
        return word_list

    def contains(self, word: str) -> bool:
        return word in self._words

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"WordList({len(self._words)} entries)"


@lru_cache(maxsize=None)
def english_words() -> WordList:
    """The bundled lowercase English dictionary."""
    return WordList.from_resource(WORDS_RESOURCE)


@lru_cache(maxsize=None)
def common_passwords() -> WordList:
    """The bundled list of commonly used passwords."""
    return WordList.from_resource(PASSWORDS_RESOURCE)


def is_password(text: str, passwords: WordList | None = None) -> bool:
    """Check whether ``text`` exactly matches a known common password.

    No normalization is applied: the match is case-sensitive and whitespace
    counts.
    """
    if passwords is None:
        passwords = common_passwords()
    return passwords.contains(text)
