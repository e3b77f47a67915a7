"""Data models for stock series, ticker search and presentation.

Architecture:
    Wire-facing and presentation models are Pydantic v2 models; state
    snapshots handed to the presentation layer are frozen dataclasses.
    Everything exported here is immutable.

Design Decisions:
    - Frozen models: a received series cannot be modified after parsing
    - Decimal for prices: rounding for display happens only in the formatter
    - ``datetime.date`` for trading days: the service sends no time component

Model Categories:
    - Market Data: PricePoint, TickerSuggestion
    - Selection: DateRange
    - Presentation: ChartPoint, TableRow, FormattedSeries
    - State: SearchState, SeriesState, DateBounds, ViewState
"""

from .date_range import DateRange
from .presentation import ChartPoint, FormattedSeries, TableRow
from .price_point import PricePoint
from .state import DateBounds, SearchState, SeriesState, ViewState
from .ticker import TickerSuggestion

__all__ = [
    "ChartPoint",
    "DateBounds",
    "DateRange",
    "FormattedSeries",
    "PricePoint",
    "SearchState",
    "SeriesState",
    "TableRow",
    "TickerSuggestion",
    "ViewState",
]
