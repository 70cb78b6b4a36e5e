"""Shared fixtures for confsearch tests."""

import httpx
import pytest

from confsearch.core.config import SearchConfig

BASE_URL = "https://wiki.example.com/wiki"


@pytest.fixture
def config():
    return SearchConfig(base_url=BASE_URL, token="secret-token", email="dev@example.com")


@pytest.fixture
def sample_payload():
    return {
        "results": [
            {
                "id": "1001",
                "title": "Deployment Runbook",
                "space": {"key": "OPS", "name": "Operations"},
                "version": {
                    "when": "2024-03-05T10:00:00.000Z",
                    "by": {"displayName": "Ada Lovelace"},
                },
                "_links": {"webui": "/spaces/OPS/pages/1001"},
                "excerpt": "<b>Deploy</b> with &amp; care",
            },
            {
                "id": "1002",
                "title": "",
                "_links": {"webui": "relative/garbage"},
            },
        ],
        "start": 0,
        "limit": 10,
        "size": 2,
    }


@pytest.fixture
def make_transport():
    """Build an httpx.MockTransport that records requests and replies with response."""

    def factory(response: httpx.Response | Exception, seen: list | None = None):
        def handler(request: httpx.Request) -> httpx.Response:
            if seen is not None:
                seen.append(request)
            if isinstance(response, Exception):
                raise response
            return response

        return httpx.MockTransport(handler)

    return factory
