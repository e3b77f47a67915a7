"""Custom exception hierarchy."""

from __future__ import annotations


class DataError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(DataError):
    """Configuration value is missing or cannot be resolved."""

    pass


class ServiceError(DataError):
    """Error from the remote stock data service."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class ResponseFormatError(DataError):
    """Service payload does not match the expected shape."""

    pass


class SeriesFetchError(DataError):
    """Loading the historical series of a symbol failed."""

    def __init__(self, message: str, symbol: str) -> None:
        super().__init__(message)
        self.symbol = symbol


class SuggestionFetchError(DataError):
    """Ticker suggestion search failed.

    Suggestion search is best-effort: controllers log this error and keep
    the previous suggestion list instead of surfacing it to the user.
    """

    def __init__(self, message: str, query: str) -> None:
        super().__init__(message)
        self.query = query


class ValidationError(DataError):
    """Input validation failure."""

    pass
