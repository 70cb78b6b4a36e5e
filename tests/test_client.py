"""Tests for the HTTP search client."""

import base64

import httpx
import pytest

from confsearch.core.client import WikiClient, basic_auth_header
from confsearch.core.errors import (
    AuthenticationFailed,
    HttpError,
    NetworkFailure,
    ParseFailure,
    ResourceNotFound,
)
from confsearch.core.query import build_search_request


def test_basic_auth_header():
    header = basic_auth_header("dev@example.com", "tok")

    assert header.startswith("Basic ")
    assert base64.b64decode(header[6:]).decode() == "dev@example.com:tok"


class TestSearch:
    """Test request construction and status mapping."""

    def test_returns_json_on_200(self, config, make_transport, sample_payload):
        seen = []
        transport = make_transport(httpx.Response(200, json=sample_payload), seen)
        request = build_search_request("runbook", config, 5)

        with WikiClient(transport=transport) as client:
            body = client.search(request)

        assert body == sample_payload
        sent = seen[0]
        assert sent.method == "GET"
        assert sent.url.path == "/wiki/rest/api/content/search"
        assert sent.url.params["cql"] == 'type=page AND text~"runbook"'
        assert sent.url.params["limit"] == "5"
        assert sent.url.params["expand"] == "space,history,version"
        assert sent.headers["Authorization"] == basic_auth_header("dev@example.com", "secret-token")
        assert sent.headers["Content-Type"] == "application/json"

    def test_401_is_authentication_failure(self, config, make_transport):
        transport = make_transport(httpx.Response(401, json={"message": "bad"}))

        with WikiClient(transport=transport) as client:
            with pytest.raises(AuthenticationFailed):
                client.search(build_search_request("x", config))

    def test_404_is_resource_not_found(self, config, make_transport):
        transport = make_transport(httpx.Response(404))

        with WikiClient(transport=transport) as client:
            with pytest.raises(ResourceNotFound):
                client.search(build_search_request("x", config))

    @pytest.mark.parametrize("status", [400, 403, 500, 503])
    def test_other_status_is_http_error(self, config, make_transport, status):
        transport = make_transport(httpx.Response(status))

        with WikiClient(transport=transport) as client:
            with pytest.raises(HttpError) as exc_info:
                client.search(build_search_request("x", config))

        assert exc_info.value.status == status
        assert exc_info.value.status_text
        assert str(status) in str(exc_info.value)

    def test_connection_error_is_network_failure(self, config, make_transport):
        transport = make_transport(httpx.ConnectError("connection refused"))

        with WikiClient(transport=transport) as client:
            with pytest.raises(NetworkFailure):
                client.search(build_search_request("x", config))

    def test_timeout_is_network_failure(self, config, make_transport):
        transport = make_transport(httpx.ReadTimeout("timed out"))

        with WikiClient(transport=transport) as client:
            with pytest.raises(NetworkFailure):
                client.search(build_search_request("x", config))

    def test_non_json_body_is_parse_failure(self, config, make_transport):
        transport = make_transport(httpx.Response(200, text="<html>login</html>"))

        with WikiClient(transport=transport) as client:
            with pytest.raises(ParseFailure):
                client.search(build_search_request("x", config))

    def test_undecodable_body_is_parse_failure(self, config):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200, headers={"Content-Encoding": "gzip"}, content=b"not gzip"
            )

        with WikiClient(transport=httpx.MockTransport(handler)) as client:
            with pytest.raises(ParseFailure):
                client.search(build_search_request("x", config))

    def test_too_many_redirects_is_network_failure(self, config, make_transport):
        transport = make_transport(httpx.TooManyRedirects("Exceeded maximum allowed redirects."))

        with WikiClient(transport=transport) as client:
            with pytest.raises(NetworkFailure):
                client.search(build_search_request("x", config))
