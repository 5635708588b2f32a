"""Tests for the Snake module."""

import pytest

from wrap_snake.snake import Direction, Snake


class TestDirection:
    def test_from_delta(self):
        assert Direction.from_delta(1, 0) == Direction.RIGHT
        assert Direction.from_delta(0, -1) == Direction.UP

    def test_from_delta_rejects_non_unit(self):
        with pytest.raises(ValueError, match="unit direction"):
            Direction.from_delta(1, 1)
        with pytest.raises(ValueError, match="unit direction"):
            Direction.from_delta(0, 0)

    def test_reverse_pairs(self):
        assert Direction.LEFT.is_reverse_of(Direction.RIGHT)
        assert Direction.UP.is_reverse_of(Direction.DOWN)
        assert not Direction.UP.is_reverse_of(Direction.RIGHT)
        assert not Direction.UP.is_reverse_of(Direction.UP)


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(5, 5)
        assert snake.head == (5, 5)
        assert len(snake) == 3

    def test_body_extends_opposite_to_direction(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert list(snake.body) == [(5, 5), (4, 5), (3, 5)]

    def test_body_extends_down_when_moving_up(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert list(snake.body) == [(5, 5), (5, 6), (5, 7)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(0, 0, length=0)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(5, 5)
        assert snake.next_head(Direction.RIGHT) == (6, 5)
        assert snake.next_head(Direction.UP) == (5, 4)

    def test_push_and_drop(self):
        snake = Snake(5, 5, length=3)
        snake.push_head((6, 5))
        assert snake.head == (6, 5)
        assert snake.drop_tail() == (3, 5)
        assert len(snake) == 3
        assert list(snake.body) == [(6, 5), (5, 5), (4, 5)]

    def test_occupies(self):
        snake = Snake(5, 5, length=3)
        assert snake.occupies(5, 5)
        assert snake.occupies(3, 5)
        assert not snake.occupies(0, 0)

