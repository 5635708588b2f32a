"""The single in-memory game session and its frame broadcaster."""

from __future__ import annotations

import asyncio
import json
import logging

from wrap_snake.config import GameConfig
from wrap_snake.engine import GameEngine
from wrap_snake.scheduler import AsyncioScheduler, Scheduler
from wrap_snake.state import GameSnapshot

logger = logging.getLogger(__name__)

_SUBSCRIBER_QUEUE_SIZE = 32


def encode_snapshot(snapshot: GameSnapshot) -> str:
    """Serialize a snapshot to compact JSON."""
    return json.dumps(snapshot.to_dict(), separators=(",", ":"))


class BroadcastRenderer:
    """Fans each rendered snapshot out to subscriber queues.

    Rendering happens inside the engine's synchronous tick, so frames are
    queued rather than sent; each WebSocket drains its own queue. A slow
    subscriber loses its oldest frames instead of stalling the game.
    """

    def __init__(self, queue_size: int = _SUBSCRIBER_QUEUE_SIZE) -> None:
        self.queue_size = queue_size
        self._subscribers: set[asyncio.Queue[str]] = set()

    def subscribe(self) -> asyncio.Queue[str]:
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self.queue_size)
        self._subscribers.add(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[str]) -> None:
        self._subscribers.discard(queue)

    def render(self, snapshot: GameSnapshot) -> None:
        if not self._subscribers:
            return
        payload = encode_snapshot(snapshot)
        for queue in self._subscribers:
            if queue.full():
                queue.get_nowait()
            queue.put_nowait(payload)


class GameSession:
    """Owns the one engine served by the API."""

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: Scheduler | None = None,
    ) -> None:
        self.broadcaster = BroadcastRenderer()
        if scheduler is None:
            scheduler = AsyncioScheduler(on_error=self._on_tick_error)
        self.engine = GameEngine(
            config, scheduler=scheduler, renderer=self.broadcaster,
        )

    def _on_tick_error(self, exc: Exception) -> None:
        """Pause after a failed tick so ``start`` can re-arm the timer."""
        logger.warning("Pausing game after tick failure: %s", exc)
        self.engine.pause()

    def state(self) -> dict:
        return self.engine.snapshot().to_dict()

    async def close(self) -> None:
        """Stop the timer so no tick outlives the app."""
        self.engine.pause()
        self.engine.scheduler.disarm()
        # Let a cancelled timer task unwind before the loop closes.
        await asyncio.sleep(0)
        logger.info("Game session closed.")
