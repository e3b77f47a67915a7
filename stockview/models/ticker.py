"""Ticker suggestion data model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TickerSuggestion(BaseModel):
    """Instrument returned by the ticker search endpoint."""

    symbol: str = Field(..., min_length=1)
    name: str = ""
    instrument_type: str = Field("", alias="type")
    region: str = ""

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, v: str) -> str:
        """Symbols are uppercase identifiers."""
        return v.upper()

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, populate_by_name=True)
