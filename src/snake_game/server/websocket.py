"""WebSocket handler streaming snapshots and accepting input."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from snake_game.controller import GameController
from snake_game.controls import parse_command

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_controller(ws: WebSocket) -> GameController:
    return ws.app.state.controller


def _encode(state: dict) -> str:
    return json.dumps(state, separators=(",", ":"))


@ws_router.websocket("/game/play")
async def play(websocket: WebSocket) -> None:
    """Send the state each tick; receive keys, commands, and resets."""
    controller = _get_controller(websocket)
    await websocket.accept()

    async def send_state(state: dict) -> None:
        if websocket.client_state == WebSocketState.CONNECTED:
            await websocket.send_text(_encode(state))

    unsubscribe = controller.subscribe(send_state)
    logger.info("Player connected.")

    # Initial snapshot so the client can draw before the first tick.
    await send_state(controller.snapshot())

    try:
        while True:
            raw = await websocket.receive_text()
            try:
                msg = json.loads(raw)
            except json.JSONDecodeError:
                continue
            if not isinstance(msg, dict):
                continue

            if msg.get("action") == "reset":
                await send_state(controller.reset())
                continue

            key = msg.get("key")
            if isinstance(key, str):
                controller.handle_key(key)
                continue

            name = msg.get("command")
            if isinstance(name, str):
                command = parse_command(name)
                if command is not None:
                    controller.apply(command)
    except WebSocketDisconnect:
        logger.info("Player disconnected.")
    finally:
        unsubscribe()
