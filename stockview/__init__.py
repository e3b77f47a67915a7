"""Stockview - stock ticker search and historical OHLCV view client."""

from .clients import StockSeriesController, TickerSearchController, ViewCoordinator
from .connectors import StockServiceClient
from .core import (
    ConfigurationError,
    DataError,
    Environment,
    ResponseFormatError,
    SeriesFetchError,
    SeriesStatus,
    ServiceError,
    Settings,
    StockDataSource,
    SuggestionFetchError,
    ValidationError,
    get_settings,
    load_settings,
)
from .models import (
    ChartPoint,
    DateBounds,
    DateRange,
    FormattedSeries,
    PricePoint,
    SearchState,
    SeriesState,
    TableRow,
    TickerSuggestion,
    ViewState,
)
from .transforms import filter_by_date_range, format_series

__version__ = "0.1.0"

__all__ = [
    # Clients
    "StockSeriesController",
    "TickerSearchController",
    "ViewCoordinator",
    # Connectors
    "StockServiceClient",
    # Core
    "ConfigurationError",
    "DataError",
    "Environment",
    "ResponseFormatError",
    "SeriesFetchError",
    "SeriesStatus",
    "ServiceError",
    "Settings",
    "StockDataSource",
    "SuggestionFetchError",
    "ValidationError",
    "get_settings",
    "load_settings",
    # Models
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
    # Transforms
    "filter_by_date_range",
    "format_series",
]
