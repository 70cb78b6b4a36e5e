"""Configuration for confsearch, read from the process environment."""

from collections.abc import Mapping
from dataclasses import dataclass
import os


TOKEN_ENV = "CONFLUENCE_API_TOKEN"
EMAIL_ENV = "CONFLUENCE_EMAIL"
URL_ENV = "CONFLUENCE_URL"

DEFAULT_BASE_URL = "https://your-domain.atlassian.net/wiki"
# Token-only setups authenticate with this placeholder username
FALLBACK_USERNAME = "user"


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class SearchConfig:
    """Immutable settings for one invocation."""

    base_url: str
    token: str | None = None
    email: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SearchConfig":
        """Create config from environment variables."""
        env = os.environ if environ is None else environ
        base_url = _clean(env.get(URL_ENV)) or DEFAULT_BASE_URL
        return cls(
            base_url=base_url.rstrip("/"),
            token=_clean(env.get(TOKEN_ENV)),
            email=_clean(env.get(EMAIL_ENV)),
        )

    @property
    def is_configured(self) -> bool:
        """True only when both the token and the account email are set."""
        return bool(self.token and self.email)

    @property
    def username(self) -> str:
        return self.email or FALLBACK_USERNAME

    def missing_settings(self) -> list[str]:
        """Names of required environment variables that are unset."""
        missing = []
        if not self.token:
            missing.append(TOKEN_ENV)
        if not self.email:
            missing.append(EMAIL_ENV)
        return missing

    def masked_token(self) -> str:
        """Token with all but the last four characters hidden."""
        if not self.token:
            return "(not set)"
        if len(self.token) <= 4:
            return "*" * len(self.token)
        return "*" * 8 + self.token[-4:]
