"""Tests for keyboard and touch bindings."""

import pytest

from wrap_snake.config import GameConfig
from wrap_snake.controls import Command, handle_key, parse_direction, resolve_key
from wrap_snake.engine import GameEngine
from wrap_snake.scheduler import ManualScheduler
from wrap_snake.snake import Direction
from wrap_snake.state import GameStatus


@pytest.fixture()
def engine():
    return GameEngine(GameConfig(cols=10, rows=10, seed=0), scheduler=ManualScheduler())


class TestResolveKey:
    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("ArrowUp", Direction.UP),
            ("w", Direction.UP),
            ("W", Direction.UP),
            ("ArrowDown", Direction.DOWN),
            ("s", Direction.DOWN),
            ("ArrowLeft", Direction.LEFT),
            ("A", Direction.LEFT),
            ("ArrowRight", Direction.RIGHT),
            ("d", Direction.RIGHT),
            (" ", Command.TOGGLE),
            ("Enter", Command.TOGGLE),
            ("r", Command.RESET),
        ],
    )
    def test_bound_keys(self, key, expected):
        assert resolve_key(key) == expected

    def test_unbound_keys(self):
        assert resolve_key("x") is None
        assert resolve_key("R") is None
        assert resolve_key("Escape") is None

    def test_touch_names(self):
        assert parse_direction("up") == Direction.UP
        assert parse_direction(" Left ") == Direction.LEFT
        assert parse_direction("diagonal") is None


class TestHandleKey:
    def test_direction_key(self, engine):
        assert handle_key(engine, "ArrowUp")
        assert engine.pending_direction == Direction.UP

    def test_reverse_key_ignored(self, engine):
        assert handle_key(engine, "ArrowLeft")
        assert engine.pending_direction == Direction.RIGHT

    def test_toggle_key(self, engine):
        handle_key(engine, " ")
        assert engine.status == GameStatus.RUNNING
        handle_key(engine, "Enter")
        assert engine.status == GameStatus.PAUSED

    def test_reset_key(self, engine):
        engine.start()
        engine.scheduler.fire(2)
        handle_key(engine, "r")
        assert engine.status == GameStatus.IDLE
        assert engine.snake.head == (4, 5)

    def test_unbound_key(self, engine):
        assert not handle_key(engine, "q")
