"""Game configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from wrap_snake.grid import MIN_COLS, MIN_ROWS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Board size and pacing rules for a game.

    Supports JSON serialization so a setup can be reproduced.
    """

    # Board
    cols: int = 20
    rows: int = 20
    initial_length: int = 3

    # Pacing
    initial_speed: int = 6
    max_speed: int = 20
    speedup_every: int = 3
    min_interval_ms: int = 60

    # Food
    spawn_attempts: int = 2000
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.cols < MIN_COLS or self.rows < MIN_ROWS:
            raise ValueError(
                f"cols must be at least {MIN_COLS} and rows at least {MIN_ROWS}.",
            )
        if not 1 <= self.initial_length <= self.cols:
            raise ValueError("initial_length must be between 1 and cols.")
        if self.initial_speed < 1:
            raise ValueError("initial_speed must be at least 1.")
        if self.max_speed < self.initial_speed:
            raise ValueError("max_speed must be >= initial_speed.")
        if self.speedup_every < 1:
            raise ValueError("speedup_every must be at least 1.")
        if self.min_interval_ms < 1:
            raise ValueError("min_interval_ms must be at least 1.")
        if self.spawn_attempts < 1:
            raise ValueError("spawn_attempts must be at least 1.")

    def to_dict(self) -> dict:
        """Serialize to a plain dict."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls(**raw)
