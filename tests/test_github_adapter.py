import asyncio

import httpx
import pytest

from ghquery.config import Settings
from ghquery.datasources import github_adapter
from ghquery.datasources.github_adapter import GitHubAdapter
from ghquery.errors import DecodeError, TransportError, UpstreamError

from conftest import payload, repo_item

QUERY = "order=desc&page=1&per_page=10&q=gin+language%3Ago&sort=stars"


def _adapter(handler) -> GitHubAdapter:
    client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), base_url="https://api.github.com"
    )
    return GitHubAdapter(Settings(), client=client)


def _fetch(adapter: GitHubAdapter, query: str = QUERY):
    async def run():
        try:
            return await adapter.fetch(query)
        finally:
            await adapter.aclose()

    return asyncio.run(run())


def test_fetch_sends_one_get_with_accept_header():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=payload(1, [repo_item(7, "gin", owner="gin-gonic")]))

    result = _fetch(_adapter(handler))

    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert request.url.path == "/search/repositories"
    assert request.url.query.decode() == QUERY
    assert request.headers["accept"] == "application/vnd.github+json"
    assert result.total_count == 1
    assert result.items[0].full_name == "gin-gonic/gin"


def test_non_200_status_raises_upstream_error_without_decoding(monkeypatch):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(403, json={"message": "API rate limit exceeded"})

    def _no_decode(body):
        raise AssertionError("decoder must not run for failed responses")

    monkeypatch.setattr(github_adapter, "decode_search_result", _no_decode)

    with pytest.raises(UpstreamError) as excinfo:
        _fetch(_adapter(handler))

    assert excinfo.value.status == 403
    assert excinfo.value.query == QUERY
    assert "403" in str(excinfo.value)


def test_connection_failure_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("name resolution failed", request=request)

    with pytest.raises(TransportError) as excinfo:
        _fetch(_adapter(handler))

    assert isinstance(excinfo.value.cause, httpx.ConnectError)
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_timeout_raises_transport_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    with pytest.raises(TransportError):
        _fetch(_adapter(handler))


def test_malformed_body_raises_decode_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"<html>oops</html>")

    with pytest.raises(DecodeError):
        _fetch(_adapter(handler))


def test_adapter_builds_its_own_client_from_settings():
    settings = Settings(GITHUB_BASE_URL="https://github.example/api/v3", GITHUB_TIMEOUT_SECONDS=3)
    adapter = GitHubAdapter(settings)
    try:
        assert str(adapter.client.base_url).startswith("https://github.example/api/v3")
        assert adapter.client.timeout.read == 3
        assert adapter.headers["User-Agent"] == "gh-query"
    finally:
        asyncio.run(adapter.aclose())
