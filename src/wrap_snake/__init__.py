"""Wrap Snake: single-player snake on a wrapping board."""

from wrap_snake.config import GameConfig
from wrap_snake.engine import GameEngine
from wrap_snake.grid import Grid
from wrap_snake.render import NullRenderer, Renderer, TextRenderer
from wrap_snake.scheduler import AsyncioScheduler, ManualScheduler, Scheduler
from wrap_snake.snake import Direction, Snake
from wrap_snake.state import GameSnapshot, GameStatus

__all__ = [
    "AsyncioScheduler",
    "Direction",
    "GameConfig",
    "GameEngine",
    "GameSnapshot",
    "GameStatus",
    "Grid",
    "ManualScheduler",
    "NullRenderer",
    "Renderer",
    "Scheduler",
    "Snake",
    "TextRenderer",
]
