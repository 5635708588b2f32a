"""Keyboard and touch-button bindings."""

from __future__ import annotations

import enum
import logging
from typing import TYPE_CHECKING

from wrap_snake.snake import Direction

if TYPE_CHECKING:
    from wrap_snake.engine import GameEngine

logger = logging.getLogger(__name__)


class Command(enum.Enum):
    """Non-directional game commands."""

    TOGGLE = "toggle"
    RESET = "reset"


DIRECTION_NAMES: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}

_KEY_MAP: dict[str, Direction | Command] = {
    "arrowup": Direction.UP,
    "w": Direction.UP,
    "arrowdown": Direction.DOWN,
    "s": Direction.DOWN,
    "arrowleft": Direction.LEFT,
    "a": Direction.LEFT,
    "arrowright": Direction.RIGHT,
    "d": Direction.RIGHT,
    " ": Command.TOGGLE,
    "enter": Command.TOGGLE,
}


def parse_direction(name: str) -> Direction | None:
    """Map a touch-button / API direction name to a Direction."""
    return DIRECTION_NAMES.get(name.strip().lower())


def resolve_key(key: str) -> Direction | Command | None:
    """Map a key name to a direction or command.

    Letter keys are case-insensitive except ``r``: only the lower-case key
    resets, so Shift+R does nothing.
    """
    if key == "r":
        return Command.RESET
    return _KEY_MAP.get(key.lower())


def handle_key(engine: GameEngine, key: str) -> bool:
    """Dispatch a key press to *engine*. Returns False for unbound keys."""
    action = resolve_key(key)
    if action is None:
        return False
    if isinstance(action, Direction):
        engine.set_direction(action)
    elif action is Command.TOGGLE:
        engine.toggle_running()
    else:
        logger.info("Reset requested from keyboard.")
        engine.reset()
    return True
