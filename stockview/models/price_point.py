"""Daily price point (OHLCV) data model."""

from datetime import date as Date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class PricePoint(BaseModel):
    """One trading day of OHLCV data."""

    date: Date
    open: Decimal = Field(..., ge=0)
    high: Decimal = Field(..., ge=0)
    low: Decimal = Field(..., ge=0)
    close: Decimal = Field(..., ge=0)
    volume: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)
