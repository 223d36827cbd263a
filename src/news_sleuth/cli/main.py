"""
Command-line interface for News Sleuth.

Commands:
- fetch: Extract the article text behind a URL
- config show: Print the effective configuration
"""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from news_sleuth import __version__
from news_sleuth.config import Settings, load_config
from news_sleuth.core.exceptions import ConfigurationError
from news_sleuth.extraction.models import ExtractionFailure, ExtractionResult
from news_sleuth.extraction.tool import describe_failure, to_tool_payload
from news_sleuth.utils.logging import get_logger, setup_logging

app = typer.Typer(
    name="news-sleuth",
    help="News Sleuth - extract article text from news URLs for credibility analysis",
    add_completion=False,
    no_args_is_help=True,
)
config_app = typer.Typer(help="Configuration management", no_args_is_help=True)
app.add_typer(config_app, name="config")

console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]News Sleuth[/bold blue] v{__version__}")
        raise typer.Exit()


def _load_settings(config_file: Optional[Path]) -> Settings:
    """Load settings, turning configuration problems into a clean exit."""
    try:
        return load_config(config_file)
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {e}")
        raise typer.Exit(2)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """
    News Sleuth - turn news article URLs into clean analyzable text.

    Use 'news-sleuth --help' for command list.
    """


@app.command()
def fetch(
    url: str = typer.Argument(
        ...,
        help="URL of the news article",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the tool payload as JSON",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Request timeout in seconds",
        min=0.1,
        max=300.0,
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Fetch a news article and print its extracted text.

    Exits with status 1 when no text could be extracted.

    Example:
        news-sleuth fetch https://example.com/news/story --json
    """
    settings = _load_settings(config_file)
    if timeout is not None:
        settings.fetcher.timeout_seconds = timeout

    setup_logging(settings.logging, level="DEBUG" if verbose else None)

    from news_sleuth.extraction.fetcher import fetch_article_content

    logger.debug(f"Fetching {url} (timeout={settings.fetcher.timeout_seconds:g}s)")
    try:
        result: ExtractionResult = asyncio.run(fetch_article_content(url, settings))
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Fetch cancelled by user[/yellow]")
        raise typer.Exit(1)

    if as_json:
        payload = to_tool_payload(result)
        typer.echo(json.dumps(payload.model_dump(), ensure_ascii=False, indent=2))
    elif isinstance(result, ExtractionFailure):
        err_console.print(Panel(
            describe_failure(result),
            title=f"Extraction failed ({result.reason.value})",
            border_style="red",
        ))
    else:
        typer.echo(result.text)

    if not result.ok:
        raise typer.Exit(1)


@config_app.command("show")
def config_show(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        exists=True,
        dir_okay=False,
    ),
) -> None:
    """Show the effective configuration."""
    settings = _load_settings(config_file)

    for section_name, section in settings:
        table = Table(title=section_name, show_header=True, header_style="bold")
        table.add_column("Setting")
        table.add_column("Value")
        for key, value in section.model_dump().items():
            table.add_row(key, str(value))
        console.print(table)


if __name__ == "__main__":
    app()
