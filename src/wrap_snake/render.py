"""Renderers that turn game snapshots into frames."""

from __future__ import annotations

from collections import deque
from typing import Protocol, TextIO

from wrap_snake.state import GameSnapshot

HEAD = "@"
BODY = "o"
FOOD = "*"
EMPTY = "."


class Renderer(Protocol):
    """Consumes a snapshot after every tick, reset and game over."""

    def render(self, snapshot: GameSnapshot) -> None: ...


class NullRenderer:
    """Renderer that draws nothing; the engine default."""

    def render(self, snapshot: GameSnapshot) -> None:
        pass


def draw_board(snapshot: GameSnapshot) -> list[str]:
    """Return the board as one string per row.

    The head is drawn last so it stays visible if food overlaps the snake.
    """
    cells = [[EMPTY] * snapshot.cols for _ in range(snapshot.rows)]
    fx, fy = snapshot.food
    cells[fy][fx] = FOOD
    for x, y in snapshot.snake[1:]:
        cells[y][x] = BODY
    hx, hy = snapshot.head
    cells[hy][hx] = HEAD
    return ["".join(row) for row in cells]


def format_frame(snapshot: GameSnapshot) -> str:
    """Render a full text frame: HUD line, board, and a game-over overlay."""
    lines = [f"Score: {snapshot.score}  Speed: {snapshot.speed}"]
    lines.extend(draw_board(snapshot))
    if snapshot.game_over:
        lines.append(f"GAME OVER  Score: {snapshot.score}")
    return "\n".join(lines)


class TextRenderer:
    """Keeps recent ASCII frames and optionally echoes them to a stream."""

    def __init__(self, stream: TextIO | None = None, keep: int = 64) -> None:
        if keep < 1:
            raise ValueError("keep must be at least 1.")
        self.stream = stream
        self.frames: deque[str] = deque(maxlen=keep)

    @property
    def last_frame(self) -> str | None:
        return self.frames[-1] if self.frames else None

    def render(self, snapshot: GameSnapshot) -> None:
        frame = format_frame(snapshot)
        self.frames.append(frame)
        if self.stream is not None:
            self.stream.write(frame + "\n\n")
            self.stream.flush()
