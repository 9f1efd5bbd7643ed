"""Player models shared across the store and ranking layers."""

from .player import PlayerStats, Stat

__all__ = ["PlayerStats", "Stat"]
