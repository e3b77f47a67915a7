"""Stock data source abstract class.

Architecture:
    Controllers talk to the remote service only through this interface.
    The HTTP implementation lives in ``connectors.stock_service``; tests
    substitute in-memory fakes.

Design Decisions:
    - Abstract base class: one seam for both the real client and fakes
    - Async context manager: ensures the HTTP session is released
    - Failures surface as ``SeriesFetchError`` / ``SuggestionFetchError``
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models import PricePoint, TickerSuggestion


class StockDataSource(ABC):
    """Abstract base class for stock data sources."""

    @abstractmethod
    async def fetch_series(self, symbol: str) -> list[PricePoint]:
        """Fetch the full daily history of a symbol, ascending by date.

        Raises:
            SeriesFetchError: If the series cannot be loaded
        """
        pass

    @abstractmethod
    async def search_tickers(self, query: str) -> list[TickerSuggestion]:
        """Search instruments matching a free-text query.

        Raises:
            SuggestionFetchError: If the search request fails
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close connections and cleanup resources."""
        pass

    async def __aenter__(self) -> StockDataSource:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
