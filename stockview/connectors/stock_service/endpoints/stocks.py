"""Historical series endpoint definition and adapter."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any
from urllib.parse import quote

import pydantic

from stockview.connectors.stock_service.schemas import StockSeriesResponse
from stockview.core.exceptions import ResponseFormatError
from stockview.models import PricePoint
from stockview.runtime.rest import ResponseAdapter, RestEndpointSpec

logger = logging.getLogger(__name__)


def build_path(params: dict[str, Any]) -> str:
    return f"/stocks/{quote(params['symbol'], safe='')}"


SPEC = RestEndpointSpec(
    id="stocks",
    method="GET",
    build_path=build_path,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a series response into ordered price points."""

    def parse(self, response: Any, params: dict[str, Any]) -> list[PricePoint]:
        """Parse a ``{"data": [...]}`` payload.

        A missing ``data`` field is an empty series, not an error. Points are
        returned ascending by date; for a repeated date the first record wins.

        Raises:
            ResponseFormatError: Payload or any record is malformed
        """
        if not isinstance(response, dict):
            raise ResponseFormatError(
                f"Expected an object for {params['symbol']}, got {type(response).__name__}"
            )
        try:
            payload = StockSeriesResponse.model_validate(response)
        except pydantic.ValidationError as e:
            raise ResponseFormatError(f"Malformed series for {params['symbol']}: {e}") from e

        points: dict[date, PricePoint] = {}
        for point in sorted(payload.data or [], key=lambda p: p.date):
            if point.date in points:
                logger.warning(
                    "Dropping duplicate trading day",
                    extra={"symbol": params["symbol"], "date": point.date.isoformat()},
                )
                continue
            points[point.date] = point
        return list(points.values())
