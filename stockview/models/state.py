"""Immutable state snapshots exposed by the controllers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..core.enums import SeriesStatus
from .date_range import DateRange
from .presentation import ChartPoint, TableRow
from .price_point import PricePoint
from .ticker import TickerSuggestion


@dataclass(frozen=True)
class SearchState:
    """Ticker search snapshot."""

    query: str = ""
    suggestions: tuple[TickerSuggestion, ...] = ()
    pending_generation: int | None = None  # newest fired request still in flight


@dataclass(frozen=True)
class SeriesState:
    """Series fetch snapshot."""

    symbol: str = ""
    points: tuple[PricePoint, ...] = ()
    loading: bool = False
    error: str | None = None
    status: SeriesStatus = SeriesStatus.IDLE


@dataclass(frozen=True)
class DateBounds:
    """Limits for the start/end date pickers."""

    start_max: date
    end_min: date | None
    end_max: date


@dataclass(frozen=True)
class ViewState:
    """Everything the presentation layer renders, in one snapshot."""

    symbol: str
    query: str
    suggestions: tuple[TickerSuggestion, ...]
    loading: bool
    error: str | None
    status: SeriesStatus
    date_range: DateRange = field(default_factory=DateRange)
    chart_series: tuple[ChartPoint, ...] = ()
    table_rows: tuple[TableRow, ...] = ()
