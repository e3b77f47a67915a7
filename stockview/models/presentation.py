"""Presentation-ready shapes produced by the series formatter."""

from datetime import date as Date
from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class ChartPoint(BaseModel):
    """Point for the price chart; numeric values are left unrounded."""

    date: Date
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    volume: int
    label: str

    model_config = ConfigDict(frozen=True)


class TableRow(BaseModel):
    """Row for the history table; every field is a display string."""

    date: str
    open: str
    high: str
    low: str
    close: str
    volume: str

    model_config = ConfigDict(frozen=True)


class FormattedSeries(BaseModel):
    """The same records shaped for the chart and the table."""

    chart_series: list[ChartPoint]
    table_rows: list[TableRow]

    model_config = ConfigDict(frozen=True)

    def __len__(self) -> int:
        return len(self.table_rows)
