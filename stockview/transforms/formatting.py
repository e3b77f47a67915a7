"""Shaping filtered records for the chart and the history table."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from ..models import ChartPoint, FormattedSeries, PricePoint, TableRow

TABLE_DATE_FORMAT = "%d.%m.%Y"
CHART_LABEL_FORMAT = "%d.%m.%y"
CURRENCY_PREFIX = "$"
PRICE_QUANTUM = Decimal("0.01")


def format_price(value: Decimal, *, prefix: str = CURRENCY_PREFIX) -> str:
    """Two decimal places, half-up rounding, e.g. ``$123.46``."""
    return f"{prefix}{value.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_UP):f}"


def format_volume(value: int) -> str:
    """Volume with thousands separators, e.g. ``1,234,567``."""
    return f"{value:,}"


def format_date(value: date, fmt: str = TABLE_DATE_FORMAT) -> str:
    return value.strftime(fmt)


def to_chart_point(point: PricePoint) -> ChartPoint:
    return ChartPoint(
        date=point.date,
        open=point.open,
        high=point.high,
        low=point.low,
        close=point.close,
        volume=point.volume,
        label=format_date(point.date, CHART_LABEL_FORMAT),
    )


def to_table_row(point: PricePoint) -> TableRow:
    return TableRow(
        date=format_date(point.date),
        open=format_price(point.open),
        high=format_price(point.high),
        low=format_price(point.low),
        close=format_price(point.close),
        volume=format_volume(point.volume),
    )


def format_series(points: Sequence[PricePoint]) -> FormattedSeries:
    """Shape the same records for both consumers.

    Ordering and record count are preserved in both outputs.
    """
    return FormattedSeries(
        chart_series=[to_chart_point(p) for p in points],
        table_rows=[to_table_row(p) for p in points],
    )
