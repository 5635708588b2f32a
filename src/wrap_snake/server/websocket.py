"""WebSocket handler for real-time play."""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from wrap_snake.controls import handle_key, parse_direction
from wrap_snake.server.session import GameSession, encode_snapshot

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_session(ws: WebSocket) -> GameSession:
    return ws.app.state.session


def apply_message(session: GameSession, msg: object) -> bool:
    """Apply one client message to the engine.

    Returns False when the message was not understood.
    """
    if not isinstance(msg, dict):
        return False
    engine = session.engine

    direction_str = msg.get("direction")
    if isinstance(direction_str, str):
        direction = parse_direction(direction_str)
        if direction is None:
            return False
        engine.set_direction(direction)
        return True

    key = msg.get("key")
    if isinstance(key, str):
        return handle_key(engine, key)

    action = msg.get("action")
    if action == "start":
        engine.start()
    elif action == "pause":
        engine.pause()
    elif action == "toggle":
        engine.toggle_running()
    elif action == "reset":
        engine.reset()
    else:
        return False
    return True


async def _pump_frames(websocket: WebSocket, queue: asyncio.Queue[str]) -> None:
    while True:
        payload = await queue.get()
        await websocket.send_text(payload)


@ws_router.websocket("/game/play")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send inputs, receive a snapshot every frame."""
    session = _get_session(websocket)
    await websocket.accept()
    queue = session.broadcaster.subscribe()
    logger.info("Player connected.")

    # Send an initial snapshot so the client can draw immediately.
    await websocket.send_text(encode_snapshot(session.engine.snapshot()))
    sender = asyncio.create_task(_pump_frames(websocket, queue))

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not apply_message(session, msg):
                logger.debug("Ignored message: %.80s", raw)
    except WebSocketDisconnect:
        logger.info("Player disconnected.")
    finally:
        session.broadcaster.unsubscribe(queue)
        sender.cancel()
        with contextlib.suppress(asyncio.CancelledError, Exception):
            await sender
