"""Pure transformations from a fetched series to displayable data."""

from .filtering import filter_by_date_range
from .formatting import (
    format_date,
    format_price,
    format_series,
    format_volume,
    to_chart_point,
    to_table_row,
)

__all__ = [
    "filter_by_date_range",
    "format_date",
    "format_price",
    "format_series",
    "format_volume",
    "to_chart_point",
    "to_table_row",
]
