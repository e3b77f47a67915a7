"""Ticker search endpoint definition and adapter."""

from __future__ import annotations

from typing import Any

import pydantic

from stockview.connectors.stock_service.schemas import TickerSearchResponse
from stockview.core.exceptions import ResponseFormatError
from stockview.models import TickerSuggestion
from stockview.runtime.rest import ResponseAdapter, RestEndpointSpec


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    return {"query": params["query"]}


SPEC = RestEndpointSpec(
    id="search_tickers",
    method="GET",
    build_path=lambda _params: "/search-tickers",
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing the suggestion array."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[TickerSuggestion]:
        try:
            suggestions = TickerSearchResponse.model_validate(response).root
        except pydantic.ValidationError as e:
            raise ResponseFormatError(f"Malformed suggestions for {params['query']!r}: {e}") from e

        # Symbols are unique within one list; keep the service's ranking
        seen: set[str] = set()
        unique: list[TickerSuggestion] = []
        for s in suggestions:
            if s.symbol not in seen:
                seen.add(s.symbol)
                unique.append(s)
        return unique
