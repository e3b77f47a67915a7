"""Unit tests for RESTTransport.

Tests focus on HTTPClient delegation and error mapping.
"""

from __future__ import annotations

import asyncio
import json
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from stockview.core import ResponseFormatError, ServiceError
from stockview.runtime.rest import RESTTransport


def response_error(cls=aiohttp.ClientResponseError, status=500):
    return cls(request_info=MagicMock(), history=(), status=status, message="boom")


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        transport = RESTTransport(base_url="http://localhost:8000/api", timeout=5.0)
        assert transport.base_url == "http://localhost:8000/api"
        assert transport._http.timeout.total == 5.0

    @pytest.mark.asyncio
    async def test_get_delegates_to_http_client(self):
        transport = RESTTransport(base_url="http://localhost:8000/api")
        transport._http.get = AsyncMock(return_value={"data": "test"})

        result = await transport.get("/test", params={"key": "value"})

        assert result == {"data": "test"}
        transport._http.get.assert_called_once_with("/test", params={"key": "value"}, headers=None)

    @pytest.mark.asyncio
    async def test_http_status_maps_to_service_error(self):
        transport = RESTTransport(base_url="http://localhost:8000/api")
        transport._http.get = AsyncMock(side_effect=response_error(status=404))

        with pytest.raises(ServiceError) as exc_info:
            await transport.get("/stocks/NOPE")

        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    async def test_connection_error_maps_to_service_error(self):
        transport = RESTTransport(base_url="http://localhost:8000/api")
        transport._http.get = AsyncMock(side_effect=aiohttp.ClientConnectionError("refused"))

        with pytest.raises(ServiceError) as exc_info:
            await transport.get("/stocks/IBM")

        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_timeout_maps_to_service_error(self):
        transport = RESTTransport(base_url="http://localhost:8000/api")
        transport._http.get = AsyncMock(side_effect=asyncio.TimeoutError())

        with pytest.raises(ServiceError):
            await transport.get("/stocks/IBM")

    @pytest.mark.asyncio
    async def test_non_json_maps_to_format_error(self):
        transport = RESTTransport(base_url="http://localhost:8000/api")
        transport._http.get = AsyncMock(
            side_effect=response_error(aiohttp.ContentTypeError, status=200)
        )

        with pytest.raises(ResponseFormatError):
            await transport.get("/stocks/IBM")

    @pytest.mark.asyncio
    async def test_invalid_json_maps_to_format_error(self):
        transport = RESTTransport(base_url="http://localhost:8000/api")
        transport._http.get = AsyncMock(side_effect=json.JSONDecodeError("bad", "x", 0))

        with pytest.raises(ResponseFormatError):
            await transport.get("/stocks/IBM")

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        transport = RESTTransport(base_url="http://localhost:8000/api")
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_called_once()
