"""Stock service raw response schemas.

These models describe the exact payloads returned by the service before
they are handed on as domain models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, RootModel

from stockview.models import PricePoint, TickerSuggestion


class StockSeriesResponse(BaseModel):
    """``GET /stocks/{symbol}`` payload; ``data`` may be absent or null."""

    data: list[PricePoint] | None = None

    model_config = ConfigDict(extra="ignore")


class TickerSearchResponse(RootModel[list[TickerSuggestion]]):
    """``GET /search-tickers`` payload: a bare ordered array."""

    pass
