"""Async HTTP client used for every request made to pbinfo."""

from typing import Optional

import httpx
from loguru import logger

from domain.exceptions import FetchError, HTTPStatusError
from infrastructure.config import DEFAULT_USER_AGENT


class AsyncHTTPClient:
    """
    Thin wrapper around ``httpx.AsyncClient``.

    The underlying client is created on first use and reused afterwards.
    Callers may inject their own client, or only a transport (tests use
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        timeout: Optional[float] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize HTTP client.

        Args:
            timeout: Request time-out in seconds, None for no time-out
            user_agent: User-Agent header sent with every request
            transport: Custom transport for the lazily built client
            client: Ready client to use instead of building one
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

        self._client = client
        self._should_close_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                transport=self.transport,
                follow_redirects=True,
            )
        return self._client

    async def get_text(self, url: str) -> str:
        """Get the decoded body of a page."""
        response = await self._get(url)
        return response.text

    async def get_bytes(self, url: str) -> bytes:
        """Get the raw body of a response."""
        response = await self._get(url)
        return response.content

    async def _get(self, url: str) -> httpx.Response:
        logger.debug(f"GET {url}")

        try:
            response = await self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchError(f"GET {url}: {e!r}", url) from e

        if not response.is_success:
            raise HTTPStatusError(url, response.status_code)

        return response

    async def aclose(self) -> None:
        """Close the underlying client if this instance created it."""
        if self._client is not None and self._should_close_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
