"""Rich tables for score diagnostics."""

from rich.table import Table
from rich.text import Text

from .scoring import ScoreBundle


def _bar(value: float, width: int = 20) -> str:
    filled = int(max(0.0, min(1.0, value)) * width)
    return "█" * filled + "░" * (width - filled)


def create_scores_table(scores: ScoreBundle) -> Table:
    table = Table(title="Signals", show_header=True, header_style="bold")
    table.add_column("Signal", no_wrap=True)
    table.add_column("Value", justify="right")
    table.add_column("Distribution", min_width=30)

    table.add_row("Tokens", str(scores.token_count), "")
    table.add_row("Dictionary words", str(scores.dictionary_words), "")
    table.add_row("Trigrams", str(scores.trigram_count), "")

    ratios = [
        ("Word score", scores.word_score),
        ("Bigram score", scores.bigram_score),
        ("Trigram score", scores.trigram_score),
        ("Quadgram score", scores.quadgram_score),
        ("Trigram coverage", scores.trigram_coverage),
        ("Letter frequency", scores.letter_freq_score),
        ("Vowel/consonant", scores.vowel_consonant_score),
        ("Repetition", scores.repetition_ratio),
        ("Shift pattern", scores.shift_pattern_ratio),
        ("Unique tokens", scores.unique_token_ratio),
        ("Control chars", scores.control_char_ratio),
    ]
    for name, value in ratios:
        table.add_row(name, f"{value:.3f}", _bar(value))

    return table


def create_verdict_table(verdicts: list[tuple[str, bool]]) -> Table:
    """One row per policy; ``verdicts`` pairs a label with is_gibberish."""
    table = Table(title="Verdicts", show_header=True, header_style="bold")
    table.add_column("Policy")
    table.add_column("Verdict")

    for label, gibberish in verdicts:
        verdict = (
            Text("GIBBERISH", style="red") if gibberish else Text("ENGLISH", style="green")
        )
        table.add_row(label, verdict)

    return table
