"""Statistical signals: letter distribution, vowel balance, repetition."""

from collections import Counter
from collections.abc import Sequence

from .dictionary import WordList
from .tables import CIPHER_SHIFTS, ENGLISH_LETTERS, LETTER_FREQUENCIES, VOWELS

IDEAL_VOWEL_RATIO = 0.5
VOWEL_RATIO_TOLERANCE = 0.3


def _letters(text: str) -> list[str]:
    return [ch.lower() for ch in text if ch in ENGLISH_LETTERS]


def _adjacent_pairs(text: str) -> list[tuple[str, str]]:
    stripped = text.strip()
    return list(zip(stripped, stripped[1:]))


def letter_frequency_score(text: str) -> float:
    """Score how close the letter distribution is to English.

    1.0 is a perfect match; the score falls by half of the total absolute
    frequency difference and bottoms out at 0.0.
    """
    letters = _letters(text)
    if not letters:
        return 0.0

    counts = Counter(letters)
    total = len(letters)
    difference = sum(
        abs(counts[letter] / total - expected)
        for letter, expected in LETTER_FREQUENCIES
    )
    return max(0.0, 1.0 - 0.5 * difference)


def vowel_consonant_score(text: str) -> float:
    letters = _letters(text)
    vowels = sum(1 for ch in letters if ch in VOWELS)
    consonants = len(letters) - vowels
    if consonants == 0:
        return 0.0

    difference = abs(vowels / consonants - IDEAL_VOWEL_RATIO)
    if difference > VOWEL_RATIO_TOLERANCE:
        return 0.0
    return 1.0 - difference / VOWEL_RATIO_TOLERANCE


def repetition_ratio(text: str) -> float:
    """Fraction of adjacent character pairs that repeat the same character."""
    pairs = _adjacent_pairs(text)
    if not pairs:
        return 0.0
    return sum(1 for a, b in pairs if a == b) / len(pairs)


def shift_pattern_ratio(text: str) -> float:
    """Fraction of adjacent pairs separated by a common cipher shift."""
    pairs = _adjacent_pairs(text)
    if not pairs:
        return 0.0
    return sum(1 for a, b in pairs if abs(ord(a) - ord(b)) in CIPHER_SHIFTS) / len(
        pairs
    )


def unique_token_ratio(words: Sequence[str]) -> float:
    if not words:
        return 0.0
    return len(set(words)) / len(words)


def dictionary_word_count(
    words: Sequence[str], dictionary: WordList, min_length: int = 1
) -> int:
    """Count tokens that are dictionary members.

    Tokens shorter than ``min_length`` never count, whatever the dictionary
    says.
    """
    return sum(
        1 for word in words if len(word) >= min_length and dictionary.contains(word)
    )


def word_score(words: Sequence[str], dictionary: WordList, min_length: int = 1) -> float:
    if not words:
        return 0.0
    return dictionary_word_count(words, dictionary, min_length) / len(words)
