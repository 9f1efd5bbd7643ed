"""Pydantic models for API I/O."""

from .rankings import (
    AssistEntry,
    DefenderEntry,
    GoalkeeperEntry,
    RankingEntry,
    ScorerEntry,
    TouchesEntry,
)
from .search import ErrorResponse, MessageResponse, PlayerNameHit, PlayerNotFoundResponse

__all__ = [
    "AssistEntry",
    "DefenderEntry",
    "ErrorResponse",
    "GoalkeeperEntry",
    "MessageResponse",
    "PlayerNameHit",
    "PlayerNotFoundResponse",
    "RankingEntry",
    "ScorerEntry",
    "TouchesEntry",
]
