"""Tick schedulers.

The engine never owns a timer directly. It talks to a :class:`Scheduler`
that keeps at most one repeating timer alive: arming always replaces the
previous timer, and disarming is synchronous.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], object]
ErrorCallback = Callable[[Exception], object]


class Scheduler(Protocol):
    """Repeating-timer interface consumed by the game engine."""

    @property
    def armed(self) -> bool: ...

    def arm(self, interval_ms: int, callback: TickCallback) -> None: ...

    def disarm(self) -> None: ...


class ManualScheduler:
    """Deterministic scheduler that only fires when told to.

    Used for headless simulation and tests: :meth:`fire` stands in for the
    timer elapsing.
    """

    def __init__(self) -> None:
        self.interval_ms: int | None = None
        self.history: list[int] = []
        self._callback: TickCallback | None = None

    @property
    def armed(self) -> bool:
        return self._callback is not None

    def arm(self, interval_ms: int, callback: TickCallback) -> None:
        self.disarm()
        self.interval_ms = interval_ms
        self.history.append(interval_ms)
        self._callback = callback

    def disarm(self) -> None:
        self._callback = None
        self.interval_ms = None

    def fire(self, times: int = 1) -> int:
        """Invoke the armed callback up to *times* times.

        Stops early if the callback disarms the timer. Returns the number of
        callbacks actually run.
        """
        fired = 0
        for _ in range(times):
            if self._callback is None:
                break
            self._callback()
            fired += 1
        return fired


def _current_task() -> asyncio.Task | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class AsyncioScheduler:
    """Runs the callback from a single asyncio task every *interval_ms*.

    ``arm`` must be called from inside a running event loop. A generation
    counter guarantees a stale loop never calls back after it was replaced
    or disarmed, including when the callback itself re-arms or disarms.

    If the callback raises, the timer stops and *on_error* is called with
    the exception so the owner can leave its running state.
    """

    def __init__(self, on_error: ErrorCallback | None = None) -> None:
        self.on_error = on_error
        self.interval_ms: int | None = None
        self._task: asyncio.Task | None = None
        self._generation = 0

    @property
    def armed(self) -> bool:
        return self._task is not None and not self._task.done()

    def arm(self, interval_ms: int, callback: TickCallback) -> None:
        self.disarm()
        self.interval_ms = interval_ms
        loop = asyncio.get_running_loop()
        self._task = loop.create_task(
            self._run(interval_ms / 1000.0, callback, self._generation),
        )
        logger.debug("Timer armed at %d ms.", interval_ms)

    def disarm(self) -> None:
        self._generation += 1
        self.interval_ms = None
        task, self._task = self._task, None
        if task is None or task.done():
            return
        # A callback disarming its own timer just lets the loop run out.
        if task is not _current_task():
            task.cancel()
        logger.debug("Timer disarmed.")

    async def _run(
        self, period: float, callback: TickCallback, generation: int,
    ) -> None:
        try:
            while generation == self._generation:
                await asyncio.sleep(period)
                if generation != self._generation:
                    break
                callback()
        except asyncio.CancelledError:
            logger.debug("Timer task cancelled.")
        except Exception as exc:
            logger.exception("Tick callback failed; timer stopped.")
            if generation != self._generation:
                return
            self._task = None
            self.interval_ms = None
            if self.on_error is not None:
                self.on_error(exc)
