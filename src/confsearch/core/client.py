"""HTTP client for the wiki content search API."""

import base64
import logging

import httpx

from confsearch.core.errors import (
    AuthenticationFailed,
    HttpError,
    NetworkFailure,
    ParseFailure,
    ResourceNotFound,
)
from confsearch.models.result import SearchRequest

logger = logging.getLogger(__name__)


def basic_auth_header(username: str, token: str) -> str:
    """Build an Authorization header value for HTTP Basic auth."""
    encoded = base64.b64encode(f"{username}:{token}".encode()).decode("ascii")
    return f"Basic {encoded}"


class WikiClient:
    """Client for the content search endpoint."""

    def __init__(self, transport: httpx.BaseTransport | None = None, timeout: float = 30.0):
        self.client = httpx.Client(
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.client.close()

    def search(self, request: SearchRequest):
        """Run one search and return the decoded JSON body."""
        headers = {
            "Authorization": basic_auth_header(
                request.credentials.username, request.credentials.token
            )
        }
        logger.debug("GET %s params=%s", request.url, request.params)

        try:
            response = self.client.get(request.url, params=request.params, headers=headers)
        except httpx.InvalidURL as e:
            raise NetworkFailure(f"Invalid wiki URL {request.base_url!r}: {e}") from e
        except httpx.DecodingError as e:
            raise ParseFailure(f"Could not decode response from {request.url}: {e}") from e
        except httpx.RequestError as e:
            raise NetworkFailure(f"Could not reach {request.base_url}: {e}") from e

        logger.debug("Response status %s", response.status_code)

        if response.status_code == 401:
            raise AuthenticationFailed(
                f"The API token or account email was rejected by {request.base_url}"
            )
        if response.status_code == 404:
            raise ResourceNotFound(f"Search endpoint not found at {request.url}")
        if not response.is_success:
            raise HttpError(response.status_code, response.reason_phrase)

        try:
            return response.json()
        except ValueError as e:
            raise ParseFailure(f"Response from {request.url} is not valid JSON") from e
