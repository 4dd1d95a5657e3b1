"""Text normalization shared by every scorer."""

from .tables import ENGLISH_LETTERS

_KEPT_CONTROLS = ("\n", "\r", "\t")


def _normalize_char(ch: str, keep_digits: bool) -> str:
    if ch in ENGLISH_LETTERS:
        return ch.lower()
    if keep_digits and "0" <= ch <= "9":
        return ch
    return " "


def normalize(text: str, keep_digits: bool = True) -> str:
    """Lowercase ASCII letters and squash everything else to single spaces.

    Each input character maps to exactly one output character, so the result
    has the same length as the input. ASCII digits survive only when
    ``keep_digits`` is set.
    """
    return "".join(_normalize_char(ch, keep_digits) for ch in text)


def tokens(normalized: str) -> list[str]:
    return normalized.split()


def is_control_char(ch: str) -> bool:
    return ch < " " and ch not in _KEPT_CONTROLS


def control_char_count(text: str) -> int:
    """Count non-printable control characters, ignoring newlines and tabs."""
    return sum(1 for ch in text if is_control_char(ch))


def control_char_ratio(text: str) -> float:
    if not text:
        return 0.0
    return control_char_count(text) / len(text)
