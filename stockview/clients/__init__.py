"""Controllers and coordinator for the stock view."""

from .stock_series import StockSeriesController
from .ticker_search import TickerSearchController
from .view_coordinator import ViewCoordinator

__all__ = ["StockSeriesController", "TickerSearchController", "ViewCoordinator"]
