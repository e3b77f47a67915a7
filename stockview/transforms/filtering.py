"""Date range filtering of a fetched price series."""

from __future__ import annotations

from collections.abc import Sequence

from ..models import DateRange, PricePoint


def filter_by_date_range(
    points: Sequence[PricePoint], date_range: DateRange | None = None
) -> list[PricePoint]:
    """Select the points whose date lies within the (inclusive) range.

    Order is preserved and the input is never mutated. An open range
    returns a copy of every point; an inverted range returns an empty list.

    Args:
        points: Series ordered ascending by date
        date_range: Optional bounds; None behaves like an open range

    Returns:
        New list holding the matching points
    """
    if date_range is None or date_range.is_open:
        return list(points)
    if date_range.is_inverted:
        return []
    return [p for p in points if date_range.contains(p.date)]
