"""HTTP client helper for the stock service."""

from __future__ import annotations

from typing import Any

import aiohttp

# The service only speaks JSON
DEFAULT_HEADERS = {"Accept": "application/json"}


class HTTPClient:
    """Async HTTP client wrapper bound to one service root."""

    def __init__(self, base_url: str | None = None, timeout: float = 30.0) -> None:
        self.base_url = base_url.rstrip("/") if base_url else base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Lazily created session; replaced if it was closed."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=DEFAULT_HEADERS)
        return self._session

    def build_url(self, url: str) -> str:
        """Prefix relative paths with the base URL."""
        if self.base_url and not url.startswith(("http://", "https://")):
            return f"{self.base_url}/{url.lstrip('/')}"
        return url

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET ``url`` and return the decoded JSON body.

        Raises:
            aiohttp.ClientResponseError: Non-2xx status
            aiohttp.ContentTypeError: Body is not JSON
        """
        request = self.session.get(self.build_url(url), params=params, headers=headers)
        async with request as response:
            response.raise_for_status()
            return await response.json()

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
