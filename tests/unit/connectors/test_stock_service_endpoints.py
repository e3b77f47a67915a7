"""Unit tests for stock service endpoint specs and adapters."""

from datetime import date
from decimal import Decimal

import pytest

from stockview.connectors.stock_service.endpoints import (
    get_endpoint_adapter,
    get_endpoint_spec,
    list_endpoints,
)
from stockview.connectors.stock_service.endpoints import search_tickers, stocks
from stockview.core import ResponseFormatError


def row(day: str, close: float = 10.5, volume: int = 100) -> dict:
    return {"date": day, "open": 10, "high": 11, "low": 9.5, "close": close, "volume": volume}


class TestRegistry:
    def test_lists_endpoints(self):
        assert set(list_endpoints()) == {"stocks", "search_tickers"}

    def test_lookup(self):
        assert get_endpoint_spec("stocks") is stocks.SPEC
        assert get_endpoint_adapter("search_tickers") is search_tickers.Adapter

    def test_unknown_endpoint(self):
        assert get_endpoint_spec("quotes") is None
        assert get_endpoint_adapter("quotes") is None


class TestStocksEndpoint:
    def test_path_quotes_symbol(self):
        assert stocks.SPEC.build_path({"symbol": "IBM"}) == "/stocks/IBM"
        assert stocks.SPEC.build_path({"symbol": "BRK/B"}) == "/stocks/BRK%2FB"

    def test_parse_series(self):
        points = stocks.Adapter().parse(
            {"data": [row("2024-01-01"), row("2024-01-02", close=11.25)]}, {"symbol": "IBM"}
        )
        assert [p.date for p in points] == [date(2024, 1, 1), date(2024, 1, 2)]
        assert points[1].close == Decimal("11.25")

    def test_missing_data_is_empty_series(self):
        assert stocks.Adapter().parse({}, {"symbol": "IBM"}) == []
        assert stocks.Adapter().parse({"data": None}, {"symbol": "IBM"}) == []
        assert stocks.Adapter().parse({"data": []}, {"symbol": "IBM"}) == []

    def test_sorts_ascending(self):
        points = stocks.Adapter().parse(
            {"data": [row("2024-01-03"), row("2024-01-01"), row("2024-01-02")]}, {"symbol": "IBM"}
        )
        assert [p.date.day for p in points] == [1, 2, 3]

    def test_duplicate_dates_keep_first(self):
        points = stocks.Adapter().parse(
            {"data": [row("2024-01-01", close=1), row("2024-01-01", close=2)]}, {"symbol": "IBM"}
        )
        assert len(points) == 1
        assert points[0].close == Decimal("1")

    def test_malformed_record(self):
        with pytest.raises(ResponseFormatError):
            stocks.Adapter().parse({"data": [{"date": "yesterday"}]}, {"symbol": "IBM"})

    def test_non_object_payload(self):
        with pytest.raises(ResponseFormatError):
            stocks.Adapter().parse([row("2024-01-01")], {"symbol": "IBM"})


class TestSearchTickersEndpoint:
    def test_query(self):
        spec = search_tickers.SPEC
        assert spec.build_path({"query": "app"}) == "/search-tickers"
        assert spec.build_query({"query": "app"}) == {"query": "app"}

    def test_parse_keeps_order(self):
        result = search_tickers.Adapter().parse(
            [
                {"symbol": "AAPL", "name": "Apple Inc.", "type": "Equity", "region": "United States"},
                {"symbol": "APLE", "name": "Apple Hospitality", "type": "Equity", "region": "US"},
            ],
            {"query": "app"},
        )
        assert [s.symbol for s in result] == ["AAPL", "APLE"]
        assert result[0].instrument_type == "Equity"

    def test_parse_drops_repeated_symbols(self):
        result = search_tickers.Adapter().parse(
            [
                {"symbol": "AAPL", "name": "first", "type": "Equity", "region": "US"},
                {"symbol": "aapl", "name": "second", "type": "Equity", "region": "US"},
            ],
            {"query": "app"},
        )
        assert len(result) == 1
        assert result[0].name == "first"

    def test_parse_empty(self):
        assert search_tickers.Adapter().parse([], {"query": "zz"}) == []

    def test_parse_malformed(self):
        with pytest.raises(ResponseFormatError):
            search_tickers.Adapter().parse({"results": []}, {"query": "app"})
