"""Stock service connector implementation."""

from .provider import StockServiceClient

__all__ = ["StockServiceClient"]
