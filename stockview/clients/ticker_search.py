"""Debounced ticker search with stale-response discard.

Keystrokes update the query immediately and (re)arm a cancelable timer.
When the quiet period elapses without another keystroke, the timer fires a
request tagged with a new generation number. A response is applied only if
its generation is still the newest one fired; anything older is dropped, so
the suggestion list always belongs to the most recent query.

Notes:
- Cancelling the timer never aborts an in-flight request; superseded
  requests run to completion and their results are ignored.
- Failures are logged and swallowed. Suggestions are best-effort and the
  previous list stays in place.
- All methods must be called from inside the running event loop.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..core import StockDataSource
from ..core.config import DEFAULT_MIN_QUERY_LENGTH, DEFAULT_SEARCH_DEBOUNCE_SECONDS
from ..models import SearchState, TickerSuggestion

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[], None]
SymbolCallback = Callable[[str], None]


class TickerSearchController:
    """Owns the search query and the suggestion list."""

    def __init__(
        self,
        source: StockDataSource,
        *,
        debounce_seconds: float = DEFAULT_SEARCH_DEBOUNCE_SECONDS,
        min_query_length: int = DEFAULT_MIN_QUERY_LENGTH,
        on_change: ChangeCallback | None = None,
        on_symbol_chosen: SymbolCallback | None = None,
    ) -> None:
        self._source = source
        self._debounce = debounce_seconds
        self._min_length = min_query_length
        self._on_change = on_change
        self._on_symbol_chosen = on_symbol_chosen

        self._query = ""
        self._suggestions: tuple[TickerSuggestion, ...] = ()
        self._generation = 0
        self._pending_generation: int | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._requests: set[asyncio.Task] = set()

    # ----------------------
    # State access
    # ----------------------
    @property
    def query(self) -> str:
        return self._query

    @property
    def suggestions(self) -> tuple[TickerSuggestion, ...]:
        return self._suggestions

    @property
    def generation(self) -> int:
        """Newest generation; responses tagged with an older one are dropped."""
        return self._generation

    @property
    def state(self) -> SearchState:
        return SearchState(
            query=self._query,
            suggestions=self._suggestions,
            pending_generation=self._pending_generation,
        )

    @property
    def has_pending_search(self) -> bool:
        """True while the debounce timer is armed."""
        return self._timer is not None

    # ----------------------
    # Input events
    # ----------------------
    def query_changed(self, text: str) -> None:
        """Store the typed text and re-arm the debounced search."""
        self._query = text
        self._cancel_timer()

        if len(text.strip()) < self._min_length:
            self._invalidate_in_flight()
            self._suggestions = ()
            self._notify()
            return

        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self._debounce, self._fire, text.strip())
        self._notify()

    def suggestion_chosen(self, suggestion: TickerSuggestion) -> str:
        """Accept a suggestion: clear the list and hand the symbol on.

        Requests still in flight are invalidated so a late response cannot
        repopulate the list after the pick.
        """
        self._cancel_timer()
        self._invalidate_in_flight()
        self._suggestions = ()
        self._notify()
        if self._on_symbol_chosen is not None:
            self._on_symbol_chosen(suggestion.symbol)
        return suggestion.symbol

    def clear(self) -> None:
        """Reset the query and suggestions and drop pending work."""
        self._cancel_timer()
        self._invalidate_in_flight()
        self._query = ""
        self._suggestions = ()
        self._notify()

    # ----------------------
    # Lifecycle
    # ----------------------
    async def wait_idle(self) -> None:
        """Wait until no timer is armed and every request has finished."""
        while self._timer is not None or self._requests:
            if self._requests:
                await asyncio.gather(*list(self._requests), return_exceptions=True)
            else:
                await asyncio.sleep(self._debounce / 4 or 0)

    async def aclose(self) -> None:
        """Cancel the timer and in-flight requests."""
        self._cancel_timer()
        tasks = list(self._requests)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._requests.clear()
        self._pending_generation = None

    # ----------------------
    # Internals
    # ----------------------
    def _fire(self, text: str) -> None:
        self._timer = None
        self._generation += 1
        generation = self._generation
        self._pending_generation = generation
        logger.debug("Firing ticker search", extra={"query": text, "generation": generation})

        task = asyncio.get_running_loop().create_task(self._run_search(text, generation))
        self._requests.add(task)
        task.add_done_callback(self._requests.discard)

    async def _run_search(self, text: str, generation: int) -> None:
        try:
            suggestions = await self._source.search_tickers(text)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            logger.warning(f"Ticker search failed for {text!r}: {e}")
            if generation == self._generation:
                self._pending_generation = None
            return

        if generation != self._generation:
            logger.debug(
                "Discarding stale suggestions",
                extra={"generation": generation, "current": self._generation},
            )
            return

        self._pending_generation = None
        self._suggestions = tuple(suggestions)
        self._notify()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _invalidate_in_flight(self) -> None:
        if self._pending_generation is not None:
            self._generation += 1
            self._pending_generation = None

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
