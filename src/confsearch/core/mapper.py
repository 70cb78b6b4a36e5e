"""Validate the search payload and normalize it for display."""

import html
import logging
import re
from datetime import date
from urllib.parse import quote

from pydantic import ValidationError

from confsearch.core.errors import ParseFailure
from confsearch.models.result import NormalizedResult
from confsearch.models.wire import RawResult, RawSearchResponse

logger = logging.getLogger(__name__)

UNTITLED = "Untitled"
UNKNOWN_USER = "Unknown"
UNKNOWN_SPACE = "Unknown"
NOT_AVAILABLE = "N/A"
NO_PREVIEW = "No preview available"

_TAG_RE = re.compile(r"<[^>]*>")
_DATE_RE = re.compile(r"^(\d{4}-\d{2}-\d{2})")
# C0 and C1 control characters, including ESC
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def parse_payload(payload) -> list[RawResult]:
    """Validate a decoded response body into raw results.

    Accepts the usual ``{"results": [...]}`` envelope, a bare list of
    entries, or nothing at all.
    """
    if payload is None:
        return []
    if isinstance(payload, list):
        payload = {"results": payload}
    if not isinstance(payload, dict):
        raise ParseFailure("Unexpected response shape: expected an object with 'results'")

    try:
        response = RawSearchResponse.model_validate(payload)
    except ValidationError as e:
        raise ParseFailure(f"Malformed search response ({e.error_count()} invalid field(s))") from e

    logger.debug("Parsed %d raw result(s)", len(response.results))
    return response.results


def clean_text(text: str | None) -> str:
    """Replace control characters with spaces and collapse whitespace."""
    return " ".join(_CONTROL_RE.sub(" ", text or "").split())


def strip_markup(text: str) -> str:
    """Remove markup tags and entities, collapsing whitespace."""
    return clean_text(html.unescape(_TAG_RE.sub("", text)))


def normalize_date(timestamp: str | None) -> str:
    """Reduce an ISO timestamp to its YYYY-MM-DD calendar date."""
    if not timestamp:
        return NOT_AVAILABLE
    match = _DATE_RE.match(timestamp.strip())
    if not match:
        return NOT_AVAILABLE
    try:
        return date.fromisoformat(match.group(1)).isoformat()
    except ValueError:
        return NOT_AVAILABLE


def page_url(base_url: str, page_id: str) -> str:
    """Absolute link to a page, independent of any link the API returned."""
    return f"{base_url.rstrip('/')}/pages/viewpage.action?pageId={quote(page_id, safe='')}"


def normalize_result(raw: RawResult, base_url: str) -> NormalizedResult:
    space = raw.space
    version = raw.version
    author = version.by if version else None

    excerpt = strip_markup(raw.excerpt) if raw.excerpt else ""

    return NormalizedResult(
        id=raw.id,
        title=clean_text(raw.title) or UNTITLED,
        space_name=clean_text(space.name if space else None) or UNKNOWN_SPACE,
        space_key=clean_text(space.key if space else None) or NOT_AVAILABLE,
        url=page_url(base_url, raw.id),
        updated_by=clean_text(author.display_name if author else None) or UNKNOWN_USER,
        updated_date=normalize_date(version.when if version else None),
        excerpt=excerpt or NO_PREVIEW,
    )


def map_results(raw_results: list[RawResult], base_url: str) -> list[NormalizedResult]:
    """Normalize raw results, keeping the order the server returned."""
    return [normalize_result(raw, base_url) for raw in raw_results]
