"""Search request and normalized result models."""

from dataclasses import dataclass


SEARCH_PATH = "/rest/api/content/search"
EXPAND_FIELDS = ("space", "history", "version")


@dataclass(frozen=True)
class Credentials:
    """Basic-auth credentials for the wiki API."""

    username: str
    token: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, token='***')"


@dataclass(frozen=True)
class SearchRequest:
    """A fully formed content search request."""

    phrase: str
    limit: int
    base_url: str
    credentials: Credentials

    @property
    def cql(self) -> str:
        """CQL expression matching pages whose text contains the phrase."""
        return f'type=page AND text~"{self.phrase}"'

    @property
    def url(self) -> str:
        return f"{self.base_url}{SEARCH_PATH}"

    @property
    def params(self) -> dict[str, str]:
        return {
            "cql": self.cql,
            "limit": str(self.limit),
            "expand": ",".join(EXPAND_FIELDS),
        }


@dataclass(frozen=True)
class NormalizedResult:
    """Display-ready search result with defaults applied."""

    id: str
    title: str
    space_name: str
    space_key: str
    url: str
    updated_by: str
    updated_date: str
    excerpt: str = ""
