from __future__ import annotations

from pydantic import BaseModel


class PlayerNameHit(BaseModel):
    strPlayer: str | None = None


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


class PlayerNotFoundResponse(ErrorResponse):
    playerName: str
