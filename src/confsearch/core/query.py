"""Build the content search request from a phrase and configuration."""

from confsearch.core.config import SearchConfig
from confsearch.core.errors import InvalidInput
from confsearch.models.result import Credentials, SearchRequest


DEFAULT_LIMIT = 10


def build_search_request(
    phrase: str, config: SearchConfig, limit: int | None = None
) -> SearchRequest:
    """Assemble a search request.

    The phrase is trimmed and must not be empty. A missing limit falls back
    to DEFAULT_LIMIT and anything below one is raised to one.
    """
    phrase = (phrase or "").strip()
    if not phrase:
        raise InvalidInput("Search phrase must not be empty")

    if limit is None:
        limit = DEFAULT_LIMIT
    limit = max(1, int(limit))

    return SearchRequest(
        phrase=phrase,
        limit=limit,
        base_url=config.base_url,
        credentials=Credentials(username=config.username, token=config.token or ""),
    )
