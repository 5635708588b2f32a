"""Run states and read-only snapshots of the game."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class GameStatus(str, enum.Enum):
    """Lifecycle states for a game."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of the engine state handed to renderers."""

    cols: int
    rows: int
    snake: tuple[tuple[int, int], ...]
    food: tuple[int, int]
    score: int
    speed: int
    interval_ms: int
    status: GameStatus

    @property
    def head(self) -> tuple[int, int]:
        return self.snake[0]

    @property
    def game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def to_dict(self) -> dict:
        """Return the full, serializable snapshot."""
        return {
            "grid": {"cols": self.cols, "rows": self.rows},
            "snake": [list(seg) for seg in self.snake],
            "food": list(self.food),
            "score": self.score,
            "speed": self.speed,
            "interval_ms": self.interval_ms,
            "status": self.status.value,
            "game_over": self.game_over,
        }
