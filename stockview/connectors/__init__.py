"""Connectors for remote stock data services."""

from .stock_service import StockServiceClient

__all__ = ["StockServiceClient"]
