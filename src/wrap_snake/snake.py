"""Snake representation and direction handling."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values.

    Screen coordinates: ``y`` grows downwards, so UP is ``(0, -1)``.
    """

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def from_delta(cls, dx: int, dy: int) -> Direction:
        """Return the direction for a unit vector, or raise ``ValueError``."""
        try:
            return cls((dx, dy))
        except ValueError:
            raise ValueError(
                f"({dx}, {dy}) is not a unit direction vector.",
            ) from None

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    def is_reverse_of(self, other: Direction) -> bool:
        """Check whether this direction is the exact 180° reversal of *other*."""
        return self.dx == -other.dx and self.dy == -other.dy


class Snake:
    """A snake represented as an ordered deque of (x, y) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        head_x: int,
        head_y: int,
        direction: Direction = Direction.RIGHT,
        length: int = 3,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        self.body: deque[tuple[int, int]] = deque(
            (head_x - direction.dx * i, head_y - direction.dy * i)
            for i in range(length)
        )

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def next_head(self, direction: Direction) -> tuple[int, int]:
        """Compute the unwrapped next head position without moving."""
        x, y = self.head
        return x + direction.dx, y + direction.dy

    def occupies(self, x: int, y: int) -> bool:
        """Check whether the snake occupies a given cell."""
        return (x, y) in self.body

    def push_head(self, cell: tuple[int, int]) -> None:
        """Prepend a new head segment."""
        self.body.appendleft(cell)

    def drop_tail(self) -> tuple[int, int]:
        """Remove and return the tail segment."""
        return self.body.pop()

