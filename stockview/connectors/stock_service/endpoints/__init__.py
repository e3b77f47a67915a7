"""Stock service REST endpoint registry."""

from __future__ import annotations

from stockview.runtime.rest import ResponseAdapter, RestEndpointSpec

from .search_tickers import SPEC as SearchTickersSpec  # noqa: N811
from .search_tickers import Adapter as SearchTickersAdapter
from .stocks import SPEC as StocksSpec  # noqa: N811
from .stocks import Adapter as StocksAdapter

# Registry mapping endpoint IDs to specs and adapters
_ENDPOINT_REGISTRY: dict[str, tuple[RestEndpointSpec, type[ResponseAdapter]]] = {
    "stocks": (StocksSpec, StocksAdapter),
    "search_tickers": (SearchTickersSpec, SearchTickersAdapter),
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[0] if entry else None


def get_endpoint_adapter(endpoint_id: str) -> type[ResponseAdapter] | None:
    """Get endpoint adapter class by ID."""
    entry = _ENDPOINT_REGISTRY.get(endpoint_id)
    return entry[1] if entry else None


def list_endpoints() -> list[str]:
    return list(_ENDPOINT_REGISTRY.keys())


__all__ = [
    "get_endpoint_adapter",
    "get_endpoint_spec",
    "list_endpoints",
]
