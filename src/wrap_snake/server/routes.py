"""REST API route handlers for the game session."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from wrap_snake.controls import parse_direction
from wrap_snake.server.models import DirectionRequest, GameState, ResetRequest
from wrap_snake.server.session import GameSession

router = APIRouter(prefix="/game", tags=["game"])


def _get_session(request: Request) -> GameSession:
    return request.app.state.session


@router.get("")
async def get_game(request: Request) -> GameState:
    """Current game snapshot."""
    return _get_session(request).state()


@router.post("/reset")
async def reset_game(body: ResetRequest, request: Request) -> GameState:
    """Start a fresh game, optionally resizing the board."""
    session = _get_session(request)
    try:
        session.engine.reset(body.cols, body.rows)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return session.state()


@router.post("/start")
async def start_game(request: Request) -> GameState:
    session = _get_session(request)
    session.engine.start()
    return session.state()


@router.post("/pause")
async def pause_game(request: Request) -> GameState:
    session = _get_session(request)
    session.engine.pause()
    return session.state()


@router.post("/toggle")
async def toggle_game(request: Request) -> GameState:
    """Pause a running game, or start it otherwise."""
    session = _get_session(request)
    session.engine.toggle_running()
    return session.state()


@router.post("/direction")
async def set_direction(body: DirectionRequest, request: Request) -> GameState:
    """Queue a direction change for the next tick."""
    session = _get_session(request)
    direction = parse_direction(body.direction)
    if direction is None:
        raise HTTPException(status_code=422, detail="Unknown direction.")
    session.engine.set_direction(direction)
    return session.state()
