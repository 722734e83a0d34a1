"""
Command-line interface for OSS Net Score.
"""

import asyncio
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from oss_net_score.config import Settings, load_settings
from oss_net_score.core import UrlOutcome, read_url_file, run_batch
from oss_net_score.exceptions import ConfigurationError
from oss_net_score.logging_config import configure_logging
from oss_net_score.scoring import format_score

# --- Typer App ---
app = typer.Typer(help="Score open-source packages from their GitHub metadata.")
# Standard output carries only result records; everything else goes to stderr.
console = Console(stderr=True)


# --- Helper Functions ---


def emit_outcome(outcome: UrlOutcome) -> None:
    """Print a result record to stdout, or the failure to stderr."""
    if outcome.ok:
        typer.echo(outcome.result.to_json_line())
    else:
        console.print(f"[red]✗ {escape(outcome.url)}[/red]: {escape(outcome.error)}")


def display_summary(outcomes: list[UrlOutcome]) -> None:
    """Display the batch results in a rich table on stderr."""
    table = Table(title="OSS Net Score Report")
    table.add_column("URL", justify="left", style="cyan", no_wrap=True)
    table.add_column("Net", justify="center", style="magenta")
    table.add_column("Bus Factor", justify="center")
    table.add_column("License", justify="center")
    table.add_column("Responsive", justify="center")
    table.add_column("Ramp Up", justify="center")
    table.add_column("Correctness", justify="center")

    for outcome in outcomes:
        if not outcome.ok:
            table.add_row(outcome.url, "[red]error[/red]", "", "", "", "", "")
            continue
        result = outcome.result
        if result.net_score >= 0.7:
            net_color = "green"
        elif result.net_score >= 0.4:
            net_color = "yellow"
        else:
            net_color = "red"
        table.add_row(
            result.url,
            f"[{net_color}]{format_score(result.net_score)}[/{net_color}]",
            format_score(result.bus_factor),
            format_score(result.license),
            format_score(result.responsiveness),
            format_score(result.ramp_up),
            format_score(result.correctness),
        )

    console.print(table)


def _prepare_settings(**overrides) -> Settings:
    try:
        settings = load_settings(**overrides)
        configure_logging(settings)
    except ConfigurationError as e:
        console.print(f"[yellow]⚠️  {escape(str(e))}[/yellow]")
        raise typer.Exit(code=1) from None
    return settings


def _score(urls: list[str], settings: Settings, summary: bool) -> None:
    try:
        outcomes = asyncio.run(run_batch(urls, settings, emit_outcome))
    except ConfigurationError as e:
        console.print(f"[yellow]⚠️  {escape(str(e))}[/yellow]")
        raise typer.Exit(code=1) from None

    if summary:
        display_summary(outcomes)

    if any(not outcome.ok for outcome in outcomes):
        raise typer.Exit(code=1)


# --- Commands ---


@app.command()
def score(
    url_file: Path = typer.Argument(
        ...,
        help="Text file with one GitHub repository or npm package URL per line.",
    ),
    fail_fast: bool | None = typer.Option(
        None,
        "--fail-fast/--keep-going",
        help="Stop at the first URL that cannot be scored (default: keep going).",
    ),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="Timeout in seconds for each HTTP request (default: 30).",
    ),
    insecure: bool = typer.Option(
        False,
        "--insecure",
        help="Disable SSL certificate verification for HTTPS requests.",
    ),
    summary: bool = typer.Option(
        False,
        "--summary",
        help="Print a summary table to stderr after scoring.",
    ),
):
    """Score every URL in a file, printing one JSON record per line."""
    if not url_file.exists():
        console.print(f"[yellow]⚠️  URL file not found: {url_file}[/yellow]")
        raise typer.Exit(code=1)
    if not url_file.is_file():
        console.print(f"[yellow]⚠️  Path is not a file: {url_file}[/yellow]")
        raise typer.Exit(code=1)

    settings = _prepare_settings(fail_fast=fail_fast, timeout=timeout, insecure=insecure)
    urls = read_url_file(url_file)
    if not urls:
        console.print("No URLs to score.")
        return

    _score(urls, settings, summary)


@app.command()
def check(
    url: str = typer.Argument(..., help="GitHub repository or npm package URL."),
    timeout: float | None = typer.Option(
        None,
        "--timeout",
        help="Timeout in seconds for each HTTP request (default: 30).",
    ),
    insecure: bool = typer.Option(
        False,
        "--insecure",
        help="Disable SSL certificate verification for HTTPS requests.",
    ),
):
    """Score a single URL."""
    settings = _prepare_settings(timeout=timeout, insecure=insecure)
    _score([url.strip()], settings, summary=False)


if __name__ == "__main__":
    app()
