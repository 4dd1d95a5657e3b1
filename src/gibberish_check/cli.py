import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from .config import DetectorConfig, config_from_env, load_config
from .detector import GibberishDetector
from .policy import Sensitivity, TieredPolicy, WeightedSumPolicy
from .visualization import create_scores_table, create_verdict_table

app = typer.Typer(help="Tell English-like text apart from gibberish.")


def setup_logging(verbose: bool = False):
    """Set up Rich logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def load_config_or_exit(config_path: Path | None) -> DetectorConfig:
    """Load the config from --config or the environment, exit on failure."""
    try:
        if config_path is not None:
            return load_config(config_path)
        return config_from_env()
    except (FileNotFoundError, ValueError, ValidationError) as e:
        typer.secho(f"Invalid config: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


def build_detector_or_exit(
    config_path: Path | None,
    sensitivity: Sensitivity | None = None,
    weighted: bool = False,
) -> GibberishDetector:
    """Build a detector, letting command-line flags override the config policy."""
    config = load_config_or_exit(config_path)
    if weighted:
        config.policy = WeightedSumPolicy()
    elif sensitivity is not None:
        config.policy = TieredPolicy(sensitivity=sensitivity)

    try:
        return GibberishDetector(config)
    except FileNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from e


@app.command()
def check(
    text: str = typer.Argument(..., help="Text to classify"),
    sensitivity: Sensitivity = typer.Option(
        None, "--sensitivity", "-s", help="Sensitivity level (overrides config)"
    ),
    weighted: bool = typer.Option(
        False, "--weighted", help="Use the weighted-sum policy instead of tiers"
    ),
    config: Path = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Classify TEXT as GIBBERISH or ENGLISH."""
    setup_logging(verbose)
    detector = build_detector_or_exit(config, sensitivity, weighted)
    typer.echo("GIBBERISH" if detector.is_gibberish(text) else "ENGLISH")


@app.command()
def scores(
    text: str = typer.Argument(..., help="Text to analyze"),
    config: Path = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Show every signal computed for TEXT and the verdict of each policy."""
    setup_logging(verbose)
    console = Console()
    detector = build_detector_or_exit(config)

    bundle = detector.scores(text)
    console.print(f"Normalized: '{bundle.normalized}'", style="dim")
    console.print(create_scores_table(bundle))
    console.print()

    verdicts = [
        (
            f"tiered/{level.value}",
            TieredPolicy(sensitivity=level).is_gibberish(text, detector.dictionary),
        )
        for level in Sensitivity
    ]
    verdicts.append(
        ("weighted", WeightedSumPolicy().is_gibberish(text, detector.dictionary))
    )
    console.print(create_verdict_table(verdicts))


@app.command()
def password(
    text: str = typer.Argument(..., help="Candidate password"),
    config: Path = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Report whether TEXT is a commonly used password."""
    setup_logging(verbose)
    detector = build_detector_or_exit(config)
    if detector.is_password(text):
        typer.echo("Common password")
    else:
        typer.echo("Not a common password")


@app.command("filter")
def filter_command(
    source: str = typer.Argument(..., help="File with one candidate per line, or -"),
    sensitivity: Sensitivity = typer.Option(
        None, "--sensitivity", "-s", help="Sensitivity level (overrides config)"
    ),
    weighted: bool = typer.Option(
        False, "--weighted", help="Use the weighted-sum policy instead of tiers"
    ),
    config: Path = typer.Option(None, "--config", "-c", help="Config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Print the candidates from SOURCE that are not gibberish."""
    setup_logging(verbose)
    detector = build_detector_or_exit(config, sensitivity, weighted)

    if source == "-":
        lines = sys.stdin.read().splitlines()
    else:
        path = Path(source)
        if not path.exists():
            typer.secho(f"File not found: {path}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1)
        lines = path.read_text(encoding="utf-8").splitlines()

    for candidate in detector.filter_candidates(lines):
        typer.echo(candidate)


def main():
    app()


if __name__ == "__main__":
    main()
