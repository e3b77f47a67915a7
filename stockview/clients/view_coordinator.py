"""High-level coordinator for one mounted stock view.

This composes the search and series controllers with the pure date-range
filter and formatter, and exposes a single API for the presentation layer:

- user triggers: search text, suggestion pick, symbol edit, date edits,
  manual refresh
- ``view``: an immutable ``ViewState`` snapshot with the chart series and
  table rows derived from the current points and date range
- subscribe/unsubscribe to receive a ``ViewState`` after every change

Notes:
- Trigger methods are synchronous and must run inside the event loop; any
  network work is scheduled as tasks owned by the controllers.
- ``loading`` and ``error`` are taken from the series controller as-is.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
import uuid
from collections.abc import Awaitable, Callable
from datetime import date

from ..connectors.stock_service import StockServiceClient
from ..core import Settings, StockDataSource, ValidationError, get_settings
from ..models import (
    DateBounds,
    DateRange,
    FormattedSeries,
    PricePoint,
    TickerSuggestion,
    ViewState,
)
from ..transforms import filter_by_date_range, format_series
from .stock_series import StockSeriesController
from .ticker_search import TickerSearchController

logger = logging.getLogger(__name__)

ViewCallback = Callable[[ViewState], Awaitable[None]] | Callable[[ViewState], None]


class ViewCoordinator:
    """Owns all state of one stock view for as long as it is mounted."""

    def __init__(
        self,
        source: StockDataSource,
        *,
        settings: Settings | None = None,
        discard_stale_series: bool = False,
        owns_source: bool = False,
    ) -> None:
        self._settings = settings or get_settings()
        self._source = source
        self._owns_source = owns_source

        self._search = TickerSearchController(
            source,
            debounce_seconds=self._settings.search_debounce_seconds,
            min_query_length=self._settings.min_query_length,
            on_change=self._notify,
            on_symbol_chosen=self.set_symbol,
        )
        self._series = StockSeriesController(
            source,
            error_message=self._settings.series_error_message,
            discard_stale=discard_stale_series,
            on_change=self._notify,
        )
        self._date_range = DateRange()
        self._subs: dict[str, ViewCallback] = {}
        self._callback_tasks: set[asyncio.Task] = set()

        # Memoized derivation keyed by (points, range) identity
        self._derived_key: tuple[tuple[PricePoint, ...], DateRange] | None = None
        self._derived = FormattedSeries(chart_series=[], table_rows=[])

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, *, discard_stale_series: bool = False
    ) -> ViewCoordinator:
        """Build a coordinator that owns its own service client."""
        settings = settings or get_settings()
        return cls(
            StockServiceClient.from_settings(settings),
            settings=settings,
            discard_stale_series=discard_stale_series,
            owns_source=True,
        )

    # ----------------------
    # Lifecycle
    # ----------------------
    def start(self, symbol: str | None = None) -> asyncio.Task:
        """Mount: load the initial symbol."""
        initial = _normalize_symbol(symbol or self._settings.default_symbol)
        if not initial:
            raise ValidationError("Initial symbol must not be empty")
        return self._series.request(initial)

    async def wait_idle(self) -> None:
        """Wait for pending searches, fetches and async callbacks."""
        await self._search.wait_idle()
        await self._series.wait_idle()
        while self._callback_tasks:
            await asyncio.gather(*list(self._callback_tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Unmount: cancel pending work and release owned resources."""
        self._subs.clear()
        await self._search.aclose()
        await self._series.aclose()
        callbacks = list(self._callback_tasks)
        for task in callbacks:
            task.cancel()
        if callbacks:
            await asyncio.gather(*callbacks, return_exceptions=True)
        self._callback_tasks.clear()
        if self._owns_source:
            await self._source.close()

    async def __aenter__(self) -> ViewCoordinator:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    # ----------------------
    # Controllers
    # ----------------------
    @property
    def search(self) -> TickerSearchController:
        return self._search

    @property
    def series(self) -> StockSeriesController:
        return self._series

    # ----------------------
    # User triggers
    # ----------------------
    def search_text_changed(self, text: str) -> None:
        self._search.query_changed(text)

    def suggestion_picked(self, suggestion: TickerSuggestion) -> None:
        """Select a suggestion; the symbol change triggers the fetch."""
        self._search.suggestion_chosen(suggestion)
        self._search.clear()

    def set_symbol(self, text: str) -> asyncio.Task | None:
        """Make ``text`` the active symbol, fetching it if it changed.

        Blank input is ignored.
        """
        symbol = _normalize_symbol(text)
        if not symbol or symbol == self._series.symbol:
            return None
        return self._series.request(symbol)

    def refresh(self) -> asyncio.Task | None:
        """Re-fetch the current symbol regardless of whether it changed.

        Ignored until a symbol has been selected.
        """
        if not self._series.symbol:
            return None
        return self._series.request()

    def set_date_range(self, start: date | None, end: date | None) -> None:
        """Replace the date range.

        Raises:
            ValidationError: If both bounds are set and start is after end
        """
        if start is not None and end is not None and start > end:
            raise ValidationError(f"Start date {start} is after end date {end}")
        new_range = DateRange(start=start, end=end)
        if new_range != self._date_range:
            self._date_range = new_range
            self._notify()

    def set_start_date(self, start: date | None) -> None:
        self.set_date_range(start, self._date_range.end)

    def set_end_date(self, end: date | None) -> None:
        self.set_date_range(self._date_range.start, end)

    def clear_date_range(self) -> None:
        self.set_date_range(None, None)

    def date_bounds(self, today: date | None = None) -> DateBounds:
        """Picker limits: start up to end (or today), end between start and today."""
        today = today or date.today()
        return DateBounds(
            start_max=self._date_range.end or today,
            end_min=self._date_range.start,
            end_max=today,
        )

    # ----------------------
    # Derived view
    # ----------------------
    @property
    def date_range(self) -> DateRange:
        return self._date_range

    @property
    def formatted(self) -> FormattedSeries:
        """Filtered and formatted slice of the current series."""
        points, date_range = self._series.points, self._date_range
        cached = self._derived_key
        if cached is None or cached[0] is not points or cached[1] != date_range:
            self._derived = format_series(filter_by_date_range(points, date_range))
            self._derived_key = (points, date_range)
        return self._derived

    @property
    def view(self) -> ViewState:
        formatted = self.formatted
        series = self._series.state
        return ViewState(
            symbol=series.symbol,
            query=self._search.query,
            suggestions=self._search.suggestions,
            loading=series.loading,
            error=series.error,
            status=series.status,
            date_range=self._date_range,
            chart_series=tuple(formatted.chart_series),
            table_rows=tuple(formatted.table_rows),
        )

    # ----------------------
    # Subscriptions
    # ----------------------
    def subscribe(self, callback: ViewCallback) -> str:
        """Receive a ViewState after every state change.

        Returns a subscription_id to later unsubscribe.
        """
        sub_id = uuid.uuid4().hex
        self._subs[sub_id] = callback
        return sub_id

    def unsubscribe(self, subscription_id: str) -> None:
        self._subs.pop(subscription_id, None)

    def _notify(self) -> None:
        if not self._subs:
            return
        state = self.view
        for cb in list(self._subs.values()):
            if inspect.iscoroutinefunction(cb):
                task = asyncio.get_running_loop().create_task(self._run_callback(cb, state))
                self._callback_tasks.add(task)
                task.add_done_callback(self._callback_tasks.discard)
                continue
            try:
                cb(state)
            except Exception as e:
                logger.error(f"Error in view callback: {e}", exc_info=True)

    async def _run_callback(self, cb: ViewCallback, state: ViewState) -> None:
        try:
            await cb(state)
        except Exception as e:
            logger.error(f"Error in view callback: {e}", exc_info=True)


def _normalize_symbol(text: str) -> str:
    return text.strip().upper()
