"""Search command implementation."""

from datetime import datetime

import click
from rich.console import Console
from rich.markup import escape

from confsearch.core.config import SearchConfig
from confsearch.core.pipeline import SearchFailure, run_search
from confsearch.core.query import DEFAULT_LIMIT
from confsearch.core.render import render_results
from confsearch.core.reporter import report_error

console = Console()


@click.command()
@click.argument("phrase")
@click.option(
    "--limit",
    "-l",
    type=click.IntRange(min=1),
    default=DEFAULT_LIMIT,
    show_default=True,
    help="Maximum results to return",
)
@click.option("--preview", "-p", is_flag=True, help="Show a text preview for each result")
def search(phrase: str, limit: int, preview: bool):
    """Search the wiki for pages containing PHRASE."""
    config = SearchConfig.from_env()

    with console.status(f"[cyan]Searching for[/cyan] [bold]{escape(phrase)}[/bold]..."):
        outcome = run_search(phrase, config, limit=limit)

    if isinstance(outcome, SearchFailure):
        raise SystemExit(report_error(console, outcome.error))

    for line in render_results(outcome.results, outcome.request.phrase, datetime.now(), preview):
        click.echo(line)
