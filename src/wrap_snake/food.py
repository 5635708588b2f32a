"""Food spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from wrap_snake.grid import Grid

logger = logging.getLogger(__name__)

DEFAULT_SPAWN_ATTEMPTS = 2000


class FoodSpawner:
    """Places the single food item by bounded random sampling.

    Uses a NumPy RNG so placement is reproducible under a fixed seed.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = DEFAULT_SPAWN_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, occupied: Collection[tuple[int, int]]) -> tuple[int, int]:
        """Return a cell not in *occupied*.

        Samples uniformly until a free cell turns up. After ``max_attempts``
        misses the last sample is returned even though it is occupied, so a
        nearly full board still terminates.
        """
        taken = occupied if isinstance(occupied, (set, frozenset)) else set(occupied)
        cell = self.grid.random_cell(self.rng)
        for _ in range(self.max_attempts - 1):
            if cell not in taken:
                return cell
            cell = self.grid.random_cell(self.rng)

        if cell in taken:
            logger.warning(
                "No free cell found after %d attempts; placing food on %s.",
                self.max_attempts, cell,
            )
        return cell
