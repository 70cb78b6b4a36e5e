"""Error types raised by the search pipeline."""


class ConfSearchError(Exception):
    """Base class for all failures reported to the user."""

    kind = "Error"


class InvalidInput(ConfSearchError):
    """The search phrase or limit is unusable."""

    kind = "InvalidInput"


class ConfigurationMissing(ConfSearchError):
    """Required credentials are not configured."""

    kind = "ConfigurationMissing"

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        names = " and ".join(self.missing) or "credentials"
        verb = "are" if len(self.missing) > 1 else "is"
        super().__init__(f"{names} {verb} not set")


class AuthenticationFailed(ConfSearchError):
    """The server rejected the credentials (HTTP 401)."""

    kind = "AuthenticationFailed"


class ResourceNotFound(ConfSearchError):
    """The search endpoint does not exist (HTTP 404)."""

    kind = "ResourceNotFound"


class HttpError(ConfSearchError):
    """Any other non-2xx response."""

    kind = "HttpError"

    def __init__(self, status: int, status_text: str = ""):
        self.status = status
        self.status_text = status_text
        message = f"HTTP {status}"
        if status_text:
            message += f": {status_text}"
        super().__init__(message)


class NetworkFailure(ConfSearchError):
    """The request never produced a response."""

    kind = "NetworkFailure"


class ParseFailure(ConfSearchError):
    """The response body was not a valid search payload."""

    kind = "ParseFailure"
