"""Tests for the FoodSpawner module."""

import numpy as np
import pytest

from wrap_snake.food import DEFAULT_SPAWN_ATTEMPTS, FoodSpawner
from wrap_snake.grid import Grid


class TestFoodSpawnerInit:
    def test_default(self):
        spawner = FoodSpawner(Grid(cols=5, rows=5))
        assert spawner.max_attempts == DEFAULT_SPAWN_ATTEMPTS == 2000

    def test_invalid_attempts(self):
        with pytest.raises(ValueError, match="at least 1"):
            FoodSpawner(Grid(cols=5, rows=5), max_attempts=0)


class TestFoodSpawning:
    def test_never_on_snake(self):
        grid = Grid(cols=6, rows=6)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(3))
        occupied = {(x, y) for x in range(6) for y in range(3)}
        for _ in range(100):
            cell = spawner.spawn(occupied)
            assert cell not in occupied
            assert grid.in_bounds(*cell)

    def test_finds_last_free_cell(self):
        grid = Grid(cols=4, rows=4)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0))
        occupied = [(x, y) for x in range(4) for y in range(4) if (x, y) != (2, 3)]
        assert spawner.spawn(occupied) == (2, 3)

    def test_full_board_falls_back_to_occupied_cell(self):
        grid = Grid(cols=3, rows=1)
        spawner = FoodSpawner(grid, rng=np.random.default_rng(0), max_attempts=10)
        occupied = {(0, 0), (1, 0), (2, 0)}
        cell = spawner.spawn(occupied)
        assert cell in occupied

    def test_deterministic(self):
        """Same seed produces the same food sequence."""
        assert self._spawn_sequence(42) == self._spawn_sequence(42)

    def test_different_seeds(self):
        assert self._spawn_sequence(1) != self._spawn_sequence(2)

    @staticmethod
    def _spawn_sequence(seed: int) -> list[tuple[int, int]]:
        spawner = FoodSpawner(Grid(cols=20, rows=20), rng=np.random.default_rng(seed))
        return [spawner.spawn(set()) for _ in range(5)]
