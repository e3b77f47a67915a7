"""Symbol-triggered series fetch with loading/error lifecycle.

States: ``IDLE -> LOADING -> (LOADED | FAILED)`` and back to ``LOADING`` on
the next trigger. Every fetch ends in a state update; request failures are
never propagated to the caller.

Notes:
- On success the stored points are replaced wholesale by the response.
- On failure the previous points stay visible and ``error`` is set.
- By default overlapping fetches race and the last response to arrive is
  applied. With ``discard_stale=True`` only the newest fetch's outcome is
  applied, mirroring the generation guard of the ticker search.
- ``loading`` stays true while any fetch is outstanding.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Callable

from ..core import SeriesStatus, StockDataSource
from ..core.config import DEFAULT_SERIES_ERROR_MESSAGE
from ..models import PricePoint, SeriesState

logger = logging.getLogger(__name__)

ChangeCallback = Callable[[], None]


class StockSeriesController:
    """Owns the selected symbol, its fetched series and the fetch status."""

    def __init__(
        self,
        source: StockDataSource,
        *,
        symbol: str = "",
        error_message: str = DEFAULT_SERIES_ERROR_MESSAGE,
        discard_stale: bool = False,
        on_change: ChangeCallback | None = None,
    ) -> None:
        self._source = source
        self._error_message = error_message
        self._discard_stale = discard_stale
        self._on_change = on_change

        self._symbol = symbol
        self._points: tuple[PricePoint, ...] = ()
        self._error: str | None = None
        self._outcome = SeriesStatus.IDLE
        self._generation = 0
        self._outstanding: set[int] = set()  # generations still in flight
        self._tasks: set[asyncio.Task] = set()

    # ----------------------
    # State access
    # ----------------------
    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def points(self) -> tuple[PricePoint, ...]:
        return self._points

    @property
    def loading(self) -> bool:
        return bool(self._outstanding)

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def status(self) -> SeriesStatus:
        return SeriesStatus.LOADING if self.loading else self._outcome

    @property
    def state(self) -> SeriesState:
        return SeriesState(
            symbol=self._symbol,
            points=self._points,
            loading=self.loading,
            error=self._error,
            status=self.status,
        )

    # ----------------------
    # Triggers
    # ----------------------
    async def fetch(self, symbol: str | None = None) -> SeriesState:
        """Fetch the series of ``symbol`` (default: current symbol) and wait.

        Returns:
            State snapshot after this fetch has been handled
        """
        await self.request(symbol)
        return self.state

    def request(self, symbol: str | None = None) -> asyncio.Task:
        """Start a fetch without waiting for it.

        ``loading`` is set before this returns; the response is handled by
        the returned task. Must be called from inside the running loop.
        """
        symbol, generation = self._begin(symbol)
        task = asyncio.get_running_loop().create_task(self._complete(symbol, generation))
        self._tasks.add(task)
        task.add_done_callback(functools.partial(self._settle, generation))
        return task

    async def wait_idle(self) -> None:
        """Wait for all outstanding fetches."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Cancel outstanding fetches."""
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    # ----------------------
    # Internals
    # ----------------------
    def _begin(self, symbol: str | None) -> tuple[str, int]:
        if symbol is not None:
            self._symbol = symbol
        if not self._symbol:
            raise ValueError("No symbol selected")

        self._generation += 1
        self._outstanding.add(self._generation)
        self._error = None
        logger.debug(
            "Fetching series", extra={"symbol": self._symbol, "generation": self._generation}
        )
        self._notify()
        return self._symbol, self._generation

    def _settle(self, generation: int, task: asyncio.Task) -> None:
        # Also reached by tasks cancelled before their first step
        self._tasks.discard(task)
        if generation in self._outstanding:
            self._outstanding.discard(generation)
            self._notify()

    async def _complete(self, symbol: str, generation: int) -> None:
        failed = False
        points: list[PricePoint] = []
        try:
            points = await self._source.fetch_series(symbol)
        except Exception as e:
            logger.warning(f"Series fetch failed for {symbol}: {e}", exc_info=True)
            failed = True

        self._outstanding.discard(generation)
        if self._discard_stale and generation != self._generation:
            logger.debug(
                "Discarding stale series response",
                extra={"symbol": symbol, "generation": generation, "current": self._generation},
            )
        elif failed:
            self._error = self._error_message
            self._outcome = SeriesStatus.FAILED
        else:
            self._points = tuple(points)
            self._error = None
            self._outcome = SeriesStatus.LOADED
        self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()
