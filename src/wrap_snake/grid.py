"""Toroidal grid geometry for the snake game."""

from __future__ import annotations

import numpy as np

MIN_COLS = 3
MIN_ROWS = 1


class Grid:
    """A ``cols × rows`` board whose edges wrap around.

    Coordinates use (x, y) ordering: ``x`` is the column, ``y`` the row.
    Leaving one edge re-enters from the opposite one.
    """

    def __init__(self, cols: int = 20, rows: int = 20) -> None:
        if cols < MIN_COLS or rows < MIN_ROWS:
            raise ValueError(
                f"Grid dimensions must be at least {MIN_COLS}×{MIN_ROWS}.",
            )
        self.cols = cols
        self.rows = rows

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def wrap(self, x: int, y: int) -> tuple[int, int]:
        """Wrap coordinates around the grid edges."""
        return x % self.cols, y % self.rows

    def center(self) -> tuple[int, int]:
        """Return the starting head cell: just left of the horizontal centre."""
        return self.wrap(self.cols // 2 - 1, self.rows // 2)

    def random_cell(self, rng: np.random.Generator) -> tuple[int, int]:
        """Sample a uniformly random cell."""
        x = int(rng.integers(0, self.cols))
        y = int(rng.integers(0, self.rows))
        return x, y
