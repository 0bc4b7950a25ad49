"""Pydantic models for API request/response schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field


class KeyPressRequest(BaseModel):
    """Request body for POST /game/keys."""

    key: str = Field(min_length=1, max_length=32)


class CommandRequest(BaseModel):
    """Request body for POST /game/commands."""

    command: str = Field(min_length=1, max_length=32)


class InputResponse(BaseModel):
    """Result of a key press or command."""

    accepted: bool
    command: str | None = None


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
