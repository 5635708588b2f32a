"""Tick-based game engine composing grid, snake, food and speed logic."""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from wrap_snake.config import GameConfig
from wrap_snake.food import FoodSpawner
from wrap_snake.grid import Grid
from wrap_snake.render import NullRenderer, Renderer
from wrap_snake.scheduler import ManualScheduler, Scheduler
from wrap_snake.snake import Direction, Snake
from wrap_snake.speed import SpeedController
from wrap_snake.state import GameSnapshot, GameStatus

logger = logging.getLogger(__name__)


class GameEngine:
    """Single-snake game engine on a wrapping board.

    The engine owns the grid, snake, food, score and speed. Each call to
    :meth:`tick` advances the game by one cell and hands the new snapshot to
    the renderer. While running, the injected scheduler calls :meth:`tick`
    every :attr:`interval_ms` milliseconds; the engine re-arms it whenever
    the speed changes and disarms it on pause or game over.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        scheduler: Scheduler | None = None,
        renderer: Renderer | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.scheduler = scheduler if scheduler is not None else ManualScheduler()
        self.renderer = renderer if renderer is not None else NullRenderer()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.speed_control = SpeedController(
            initial=self.config.initial_speed,
            maximum=self.config.max_speed,
            every=self.config.speedup_every,
            min_interval_ms=self.config.min_interval_ms,
        )
        self.reset(self.config.cols, self.config.rows)

    # -- read-only views -------------------------------------------------

    @property
    def speed(self) -> int:
        return self.speed_control.speed

    @property
    def interval_ms(self) -> int:
        """Tick period for the current speed."""
        return self.speed_control.interval_ms

    @property
    def running(self) -> bool:
        return self.status == GameStatus.RUNNING

    @property
    def game_over(self) -> bool:
        return self.status == GameStatus.GAME_OVER

    def snapshot(self) -> GameSnapshot:
        """Return an immutable copy of the current state."""
        return GameSnapshot(
            cols=self.grid.cols,
            rows=self.grid.rows,
            snake=tuple(self.snake.body),
            food=self.food,
            score=self.score,
            speed=self.speed,
            interval_ms=self.interval_ms,
            status=self.status,
        )

    # -- lifecycle -------------------------------------------------------

    def reset(self, cols: int | None = None, rows: int | None = None) -> GameSnapshot:
        """Start a fresh game, optionally on a board of a new size.

        Leaves the engine idle with the timer disarmed. Invalid dimensions
        raise ``ValueError`` before any state changes.
        """
        if cols is None:
            cols = self.grid.cols
        if rows is None:
            rows = self.grid.rows
        if self.config.initial_length > cols:
            raise ValueError("Board is too narrow for the initial snake.")
        grid = Grid(cols, rows)

        self.scheduler.disarm()
        self.grid = grid

        head_x, head_y = self.grid.center()
        self.snake = Snake(
            head_x, head_y, Direction.RIGHT, length=self.config.initial_length,
        )
        # Narrow boards push the initial tail past the left edge.
        self.snake.body = deque(
            self.grid.wrap(x, y) for x, y in self.snake.body
        )
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT

        self.food_spawner = FoodSpawner(
            self.grid, rng=self.rng, max_attempts=self.config.spawn_attempts,
        )
        self.score = 0
        self.speed_control.reset()
        self.status = GameStatus.IDLE
        self.spawn_food()

        logger.info("Game reset on a %dx%d board.", cols, rows)
        return self._emit()

    def start(self) -> None:
        """Run the game: arm the timer at the current interval.

        Starting after a game over begins a fresh game on the same board.
        """
        if self.status == GameStatus.RUNNING:
            return
        if self.status == GameStatus.GAME_OVER:
            self.reset()
        self.status = GameStatus.RUNNING
        self.scheduler.arm(self.interval_ms, self.tick)
        logger.info("Game started at speed %d.", self.speed)

    def pause(self) -> None:
        """Suspend the timer, keeping all state."""
        if self.status != GameStatus.RUNNING:
            return
        self.scheduler.disarm()
        self.status = GameStatus.PAUSED
        logger.info("Game paused at score %d.", self.score)

    def toggle_running(self) -> None:
        if self.running:
            self.pause()
        else:
            self.start()

    # -- input -----------------------------------------------------------

    def set_direction(self, direction: Direction) -> None:
        """Queue a direction for the next tick, ignoring 180° reversals."""
        if direction.is_reverse_of(self.direction):
            logger.debug("Ignored reversal to %s.", direction.name)
            return
        self.pending_direction = direction

    def set_direction_delta(self, dx: int, dy: int) -> None:
        """Queue a direction given as a unit vector."""
        self.set_direction(Direction.from_delta(dx, dy))

    # -- simulation ------------------------------------------------------

    def spawn_food(self) -> tuple[int, int]:
        """Place the food on a free cell (bounded-retry, see FoodSpawner)."""
        self.food = self.food_spawner.spawn(set(self.snake.body))
        return self.food

    def tick(self) -> GameSnapshot:
        """Advance the game by one step.

        Returns the resulting snapshot. After a game over this is a no-op.
        """
        if self.status == GameStatus.GAME_OVER:
            return self.snapshot()

        # The queued direction was checked against an older heading.
        if not self.pending_direction.is_reverse_of(self.direction):
            self.direction = self.pending_direction

        new_head = self.grid.wrap(*self.snake.next_head(self.direction))

        # Every current segment counts, the tail included.
        if self.snake.occupies(*new_head):
            self._end_game()
            return self._emit()

        self.snake.push_head(new_head)

        if new_head == self.food:
            self.score += 1
            if self.speed_control.on_score(self.score):
                logger.debug(
                    "Speed up to %d (%d ms).", self.speed, self.interval_ms,
                )
                if self.running:
                    self.scheduler.arm(self.interval_ms, self.tick)
            self.spawn_food()
        else:
            self.snake.drop_tail()

        return self._emit()

    def _end_game(self) -> None:
        """Stop the timer and freeze the board."""
        self.scheduler.disarm()
        self.status = GameStatus.GAME_OVER
        logger.info(
            "Game over: length %d, final score %d.", len(self.snake), self.score,
        )

    def _emit(self) -> GameSnapshot:
        snapshot = self.snapshot()
        self.renderer.render(snapshot)
        return snapshot
