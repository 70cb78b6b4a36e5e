"""Data models for confsearch."""

from confsearch.models.result import Credentials, NormalizedResult, SearchRequest
from confsearch.models.wire import RawResult, RawSearchResponse

__all__ = [
    "Credentials",
    "NormalizedResult",
    "SearchRequest",
    "RawResult",
    "RawSearchResponse",
]
