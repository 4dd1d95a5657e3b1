"""Character n-gram extraction and scoring against common-pattern tables."""

from collections.abc import Container, Sequence

from .normalize import normalize, tokens


def ngrams(text: str, n: int, keep_digits: bool = True) -> list[str]:
    """Return every n-character window of every token, left to right.

    Windows never cross a token boundary and tokens shorter than ``n``
    contribute nothing.
    """
    if n < 1:
        raise ValueError(f"n-gram length must be positive, got {n}")

    grams = []
    for token in tokens(normalize(text, keep_digits=keep_digits)):
        grams.extend(token[i : i + n] for i in range(len(token) - n + 1))
    return grams


def ngram_score(grams: Sequence[str], table: Container[str]) -> float:
    """Fraction of ``grams`` found in ``table``; 0.0 when there are none."""
    if not grams:
        return 0.0
    hits = sum(1 for gram in grams if gram in table)
    return hits / len(grams)


def ngram_coverage(grams: Sequence[str], text_length: int) -> float:
    """Trigram count relative to the number a gap-free text would produce."""
    if text_length <= 3:
        return 1.0
    return len(grams) / (text_length - 2)
