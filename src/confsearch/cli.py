"""CLI entry point for confsearch."""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from confsearch import __version__
from confsearch.commands import config_cmd, search


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(version=__version__, prog_name="confsearch")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """confsearch - Search a Confluence wiki from the terminal.

    Credentials are read from CONFLUENCE_API_TOKEN and CONFLUENCE_EMAIL;
    CONFLUENCE_URL overrides the wiki base URL.

    Examples:

        confsearch search "deployment runbook"

        confsearch search onboarding --limit 5

        confsearch config show
    """
    configure_logging(verbose)


# Register commands
main.add_command(search.search)
main.add_command(config_cmd.config_group)


if __name__ == "__main__":
    main()
