"""Turn pipeline outcomes into user-facing messages and exit codes."""

from rich.console import Console
from rich.markup import escape

from confsearch.core.config import DEFAULT_BASE_URL, EMAIL_ENV, TOKEN_ENV, URL_ENV
from confsearch.core.errors import (
    AuthenticationFailed,
    ConfigurationMissing,
    ConfSearchError,
    NetworkFailure,
    ResourceNotFound,
)
from confsearch.core.pipeline import SearchFailure, SearchOutcome

EXIT_OK = 0
EXIT_FAILURE = 1

TOKEN_HELP_URL = "https://id.atlassian.com/manage-profile/security/api-tokens"


def exit_code_for(outcome: SearchOutcome) -> int:
    return EXIT_FAILURE if isinstance(outcome, SearchFailure) else EXIT_OK


def _hints(error: ConfSearchError) -> list[str]:
    if isinstance(error, ConfigurationMissing):
        hints = [f"export {name}=<value>" for name in error.missing]
        hints.append(f"Optionally set {URL_ENV} (default: {DEFAULT_BASE_URL})")
        hints.append(f"Create an API token at {TOKEN_HELP_URL}")
        return hints
    if isinstance(error, AuthenticationFailed):
        return [
            f"Check {TOKEN_ENV} and {EMAIL_ENV}",
            f"Create a new API token at {TOKEN_HELP_URL}",
        ]
    if isinstance(error, ResourceNotFound):
        return [f"Verify {URL_ENV} points at your wiki (e.g. {DEFAULT_BASE_URL})"]
    if isinstance(error, NetworkFailure):
        return [f"Check your network connection and {URL_ENV}"]
    return []


def report_error(console: Console, error: ConfSearchError) -> int:
    """Print an error with any hints and return the exit code to use."""
    console.print(f"[red]Error ({error.kind}):[/red] {escape(str(error))}")
    for hint in _hints(error):
        console.print(f"  [dim]{escape(hint)}[/dim]")
    return EXIT_FAILURE
