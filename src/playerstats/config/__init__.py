"""Configuration helpers for service settings and ranking views."""

from .rankings import (
    DEFENDER_MIN_TACKLES,
    DEFENDER_POSITIONS,
    TOP_LIMIT,
    RankingRules,
    get_ranking,
    iter_rankings,
)
from .settings import Settings

__all__ = [
    "DEFENDER_MIN_TACKLES",
    "DEFENDER_POSITIONS",
    "TOP_LIMIT",
    "RankingRules",
    "Settings",
    "get_ranking",
    "iter_rankings",
]
