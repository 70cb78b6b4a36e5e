"""Search pipeline returning a success or failure outcome.

Stages run in order: config check, query build, HTTP request, mapping.
The first failure stops the pipeline and is returned, never raised.
"""

import logging
from dataclasses import dataclass, field

import httpx

from confsearch.core.client import WikiClient
from confsearch.core.config import SearchConfig
from confsearch.core.errors import ConfigurationMissing, ConfSearchError
from confsearch.core.mapper import map_results, parse_payload
from confsearch.core.query import build_search_request
from confsearch.models.result import NormalizedResult, SearchRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchSuccess:
    request: SearchRequest
    results: list[NormalizedResult] = field(default_factory=list)


@dataclass(frozen=True)
class SearchFailure:
    error: ConfSearchError


SearchOutcome = SearchSuccess | SearchFailure


def run_search(
    phrase: str,
    config: SearchConfig,
    limit: int | None = None,
    transport: httpx.BaseTransport | None = None,
) -> SearchOutcome:
    """Run one search end to end."""
    try:
        if not config.is_configured:
            raise ConfigurationMissing(config.missing_settings())

        request = build_search_request(phrase, config, limit)

        with WikiClient(transport=transport) as client:
            payload = client.search(request)

        results = map_results(parse_payload(payload), request.base_url)
    except ConfSearchError as e:
        logger.debug("Search failed with %s: %s", e.kind, e)
        return SearchFailure(e)

    logger.debug("Search returned %d result(s)", len(results))
    return SearchSuccess(request=request, results=results)
