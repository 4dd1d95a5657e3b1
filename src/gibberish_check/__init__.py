"""Classify short text fragments as English-like content or gibberish."""

from .config import DetectorConfig, load_config
from .detector import GibberishDetector
from .dictionary import WordList, common_passwords, english_words, is_password
from .policy import (
    Policy,
    Sensitivity,
    TieredPolicy,
    WeightedSumPolicy,
    WeightedSumThresholds,
)
from .scoring import ScoreBundle, score_text

__all__ = [
    "DetectorConfig",
    "GibberishDetector",
    "Policy",
    "ScoreBundle",
    "Sensitivity",
    "TieredPolicy",
    "WeightedSumPolicy",
    "WeightedSumThresholds",
    "WordList",
    "common_passwords",
    "english_words",
    "is_gibberish",
    "is_password",
    "load_config",
    "looks_like_english",
    "score_text",
]


def is_gibberish(text: str, sensitivity: Sensitivity = Sensitivity.MEDIUM) -> bool:
    """Return True when ``text`` does not read as English at ``sensitivity``."""
    return TieredPolicy(sensitivity=sensitivity).is_gibberish(text, english_words())


def looks_like_english(text: str) -> bool:
    """Weighted-sum check; True means the text looks like structured English.

    This is the opposite polarity of ``is_gibberish``.
    """
    return WeightedSumPolicy().looks_like_english(text, english_words())
