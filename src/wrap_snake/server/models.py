"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from wrap_snake.grid import MIN_COLS, MIN_ROWS


class ResetRequest(BaseModel):
    """Request body for POST /game/reset."""

    cols: int | None = Field(default=None, ge=MIN_COLS, le=200)
    rows: int | None = Field(default=None, ge=MIN_ROWS, le=200)


class DirectionRequest(BaseModel):
    """Request body for POST /game/direction."""

    direction: Literal["up", "down", "left", "right"]


class GridInfo(BaseModel):
    cols: int
    rows: int


class GameState(BaseModel):
    """Snapshot of the running game."""

    grid: GridInfo
    snake: list[list[int]]
    food: list[int]
    score: int
    speed: int
    interval_ms: int
    status: str
    game_over: bool
