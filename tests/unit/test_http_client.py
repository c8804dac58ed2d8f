"""Unit tests for the async HTTP client wrapper."""

import httpx
import pytest

from domain.exceptions import FetchError, HTTPStatusError
from infrastructure.http_client import AsyncHTTPClient


def _transport(handler):
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_get_text_and_bytes():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/page":
            return httpx.Response(200, text="<p>ușoară</p>")
        return httpx.Response(200, content=b"\x00\x01raw")

    async with AsyncHTTPClient(transport=_transport(handler)) as client:
        assert await client.get_text("https://www.pbinfo.ro/page") == "<p>ușoară</p>"
        assert await client.get_bytes("https://www.pbinfo.ro/file") == b"\x00\x01raw"


@pytest.mark.asyncio
async def test_sends_user_agent():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers["User-Agent"])
        return httpx.Response(200, text="ok")

    async with AsyncHTTPClient(user_agent="pbinfo-tests", transport=_transport(handler)) as client:
        await client.get_text("https://www.pbinfo.ro/")

    assert seen == ["pbinfo-tests"]


@pytest.mark.asyncio
async def test_non_success_status_raises_http_status_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(404, text="missing")

    async with AsyncHTTPClient(transport=_transport(handler)) as client:
        with pytest.raises(HTTPStatusError) as exc_info:
            await client.get_text("https://www.pbinfo.ro/probleme/0")

    assert exc_info.value.status_code == 404
    assert exc_info.value.url == "https://www.pbinfo.ro/probleme/0"
    assert "404 Not Found" in str(exc_info.value)


@pytest.mark.asyncio
async def test_timeout_raises_fetch_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with AsyncHTTPClient(transport=_transport(handler)) as client:
        with pytest.raises(FetchError) as exc_info:
            await client.get_bytes("https://www.pbinfo.ro/php/descarca-test.php?id=1&tip=in")

    assert not isinstance(exc_info.value, HTTPStatusError)
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)


@pytest.mark.asyncio
async def test_underlying_client_is_built_once():
    client = AsyncHTTPClient(transport=_transport(lambda request: httpx.Response(200)))

    first = client.client
    second = client.client

    assert first is second
    await client.aclose()


@pytest.mark.asyncio
async def test_injected_client_is_not_closed():
    injected = httpx.AsyncClient(transport=_transport(lambda request: httpx.Response(200)))
    client = AsyncHTTPClient(client=injected)

    await client.aclose()

    assert client.client is injected
    assert not injected.is_closed
    await injected.aclose()
