import pytest

from gibberish_check import ScoreBundle, WordList


@pytest.fixture
def pangram_words():
    return WordList.from_words(
        ["the", "quick", "brown", "fox", "jumps", "over", "lazy", "dog"]
    )


@pytest.fixture
def empty_words():
    return WordList()


@pytest.fixture
def make_scores():
    """Build a ScoreBundle with neutral values, overriding what a test needs."""

    def _make(**overrides) -> ScoreBundle:
        values = dict(
            normalized="",
            token_count=10,
            dictionary_words=0,
            word_score=0.0,
            bigram_score=0.0,
            trigram_score=0.0,
            quadgram_score=0.0,
            trigram_count=10,
            trigram_coverage=1.0,
            letter_freq_score=0.0,
            vowel_consonant_score=0.0,
            repetition_ratio=0.0,
            shift_pattern_ratio=0.0,
            unique_token_ratio=1.0,
            control_char_ratio=0.0,
        )
        values.update(overrides)
        return ScoreBundle(**values)

    return _make
