"""Adaptive speed control."""

from __future__ import annotations

import math


def interval_for_speed(speed: int, min_interval_ms: int = 60) -> int:
    """Return the tick period in milliseconds for *speed* ticks per second.

    Halves round up, so speed 16 gives 63 ms rather than 62.
    """
    return max(min_interval_ms, math.floor(1000 / speed + 0.5))


class SpeedController:
    """Tracks the current speed and steps it up as the score grows."""

    def __init__(
        self,
        initial: int = 6,
        maximum: int = 20,
        every: int = 3,
        min_interval_ms: int = 60,
    ) -> None:
        if not 1 <= initial <= maximum:
            raise ValueError("Speed bounds must satisfy 1 <= initial <= maximum.")
        if every < 1:
            raise ValueError("every must be at least 1.")
        self.initial = initial
        self.maximum = maximum
        self.every = every
        self.min_interval_ms = min_interval_ms
        self.speed = initial

    @property
    def interval_ms(self) -> int:
        return interval_for_speed(self.speed, self.min_interval_ms)

    def reset(self) -> None:
        self.speed = self.initial

    def on_score(self, score: int) -> bool:
        """Apply the step-up rule for a new *score*.

        Returns True if the speed changed.
        """
        if score <= 0 or score % self.every != 0:
            return False
        previous = self.speed
        self.speed = min(self.maximum, self.speed + 1)
        return self.speed != previous
