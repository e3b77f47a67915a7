"""Stock service REST client.

Architecture:
    This client uses the endpoint registry to look up specs and adapters,
    then uses RestRunner to execute requests. It implements the
    StockDataSource interface consumed by the controllers.
"""

from __future__ import annotations

import logging
from typing import Any

from stockview.core import (
    DataError,
    SeriesFetchError,
    Settings,
    StockDataSource,
    SuggestionFetchError,
    get_settings,
)
from stockview.models import PricePoint, TickerSuggestion
from stockview.runtime.rest import RestRunner, RESTTransport

from .endpoints import get_endpoint_adapter, get_endpoint_spec

logger = logging.getLogger(__name__)


class StockServiceClient(StockDataSource):
    """HTTP client for the stock series and ticker search service."""

    def __init__(self, base_url: str, *, timeout: float = 30.0) -> None:
        """Initialize the client.

        Args:
            base_url: Service root, e.g. ``http://localhost:8000/api``
            timeout: Total per-request timeout in seconds
        """
        self._transport = RESTTransport(base_url=base_url, timeout=timeout)
        self._runner = RestRunner(self._transport)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> StockServiceClient:
        settings = settings or get_settings()
        return cls(settings.api_base_url, timeout=settings.request_timeout)

    @property
    def base_url(self) -> str | None:
        return self._transport.base_url

    async def fetch(self, endpoint_id: str, params: dict[str, Any]) -> Any:
        """Fetch data from a service endpoint.

        Args:
            endpoint_id: Endpoint identifier ("stocks" or "search_tickers")
            params: Request parameters

        Returns:
            Parsed response from the endpoint adapter

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        return await self._runner.run(spec=spec, adapter=adapter_cls(), params=params)

    async def fetch_series(self, symbol: str) -> list[PricePoint]:
        try:
            points = await self.fetch("stocks", {"symbol": symbol})
        except DataError as e:
            raise SeriesFetchError(f"Failed to load series for {symbol}: {e}", symbol=symbol) from e
        logger.debug("Series loaded", extra={"symbol": symbol, "points": len(points)})
        return points

    async def search_tickers(self, query: str) -> list[TickerSuggestion]:
        try:
            return await self.fetch("search_tickers", {"query": query})
        except DataError as e:
            msg = f"Ticker search failed for {query!r}: {e}"
            raise SuggestionFetchError(msg, query=query) from e

    async def close(self) -> None:
        await self._transport.close()
