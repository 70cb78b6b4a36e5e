"""Config command implementation."""

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from confsearch.core.config import EMAIL_ENV, TOKEN_ENV, URL_ENV, SearchConfig

console = Console()


@click.group("config")
def config_group():
    """Inspect confsearch configuration."""
    pass


@config_group.command("show")
def show():
    """Show the current configuration and whether it is complete."""
    config = SearchConfig.from_env()

    status = "[green]yes[/green]" if config.is_configured else "[yellow]no[/yellow]"
    lines = [
        f"[bold]Base URL:[/bold] {escape(config.base_url)}  [dim]({URL_ENV})[/dim]",
        f"[bold]Email:[/bold] {escape(config.email or '(not set)')}  [dim]({EMAIL_ENV})[/dim]",
        f"[bold]API token:[/bold] {escape(config.masked_token())}  [dim]({TOKEN_ENV})[/dim]",
        f"[bold]Configured:[/bold] {status}",
    ]
    console.print(Panel("\n".join(lines), title="confsearch configuration"))

    missing = config.missing_settings()
    if missing:
        console.print(f"\n[dim]Set {', '.join(missing)} to enable searching[/dim]")
