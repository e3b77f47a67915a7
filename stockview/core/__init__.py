"""Core components."""

from .base import StockDataSource
from .config import (
    Settings,
    default_base_url,
    get_settings,
    load_settings,
)
from .enums import Environment, SeriesStatus
from .exceptions import (
    ConfigurationError,
    DataError,
    ResponseFormatError,
    SeriesFetchError,
    ServiceError,
    SuggestionFetchError,
    ValidationError,
)

__all__ = [
    "StockDataSource",
    "Settings",
    "get_settings",
    "load_settings",
    "default_base_url",
    "Environment",
    "SeriesStatus",
    "ConfigurationError",
    "DataError",
    "ResponseFormatError",
    "SeriesFetchError",
    "ServiceError",
    "SuggestionFetchError",
    "ValidationError",
]
