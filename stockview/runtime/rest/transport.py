"""REST transport that maps HTTP failures onto the library's exceptions."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from ...core.exceptions import ResponseFormatError, ServiceError
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


class RESTTransport:
    """Thin wrapper around HTTPClient used by endpoint runners."""

    def __init__(self, base_url: str, *, timeout: float = 30.0) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET a path relative to the base URL.

        Raises:
            ServiceError: Connection failure, timeout or non-2xx status
            ResponseFormatError: Body is not valid JSON
        """
        logger.debug("GET request", extra={"path": path, "params": params})
        try:
            return await self._http.get(path, params=params, headers=headers)
        except aiohttp.ContentTypeError as e:
            raise ResponseFormatError(f"Non-JSON response from {path}") from e
        except aiohttp.ClientResponseError as e:
            raise ServiceError(f"HTTP {e.status} from {path}", status_code=e.status) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise ServiceError(f"Request to {path} failed: {e!r}") from e
        except ValueError as e:
            raise ResponseFormatError(f"Invalid JSON from {path}") from e

    async def close(self) -> None:
        await self._http.close()
