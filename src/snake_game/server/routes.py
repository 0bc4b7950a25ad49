"""REST API route handlers for the running game."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snake_game.controller import GameController
from snake_game.controls import parse_command
from snake_game.server.models import (
    CommandRequest,
    ErrorResponse,
    InputResponse,
    KeyPressRequest,
)

router = APIRouter(prefix="/game", tags=["game"])


def _get_controller(request: Request) -> GameController:
    return request.app.state.controller


@router.get("")
async def get_game(request: Request) -> dict:
    """Current game snapshot."""
    return _get_controller(request).snapshot()


@router.post("/reset")
async def reset_game(request: Request) -> dict:
    """Restore the initial state and return it."""
    return _get_controller(request).reset()


@router.post("/keys")
async def press_key(body: KeyPressRequest, request: Request) -> InputResponse:
    """Apply a keyboard key; keys other than the arrows are ignored."""
    command = _get_controller(request).handle_key(body.key)
    return InputResponse(
        accepted=command is not None,
        command=command.value if command else None,
    )


@router.post(
    "/commands", responses={422: {"model": ErrorResponse}},
)
async def send_command(body: CommandRequest, request: Request) -> InputResponse:
    """Apply a named movement command, as the on-screen arrows do."""
    command = parse_command(body.command)
    if command is None:
        raise HTTPException(
            status_code=422, detail=f"Unknown command: {body.command}.",
        )
    _get_controller(request).apply(command)
    return InputResponse(accepted=True, command=command.value)
