"""Environment-derived service settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning("%s below minimum %d: %d; using default %d", name, min_value, value, default)
        return default
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    logger.warning("Invalid boolean for %s: %s; using default %s", name, raw, default)
    return default


@dataclass(frozen=True)
class Settings:
    mongodb_uri: str = "mongodb://localhost:27017"
    database: str = "football"
    collection: str = "players"
    timeout_ms: int = 5000
    host: str = "0.0.0.0"
    port: int = 3000
    search_limit: int = 5
    search_literal: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        return cls(
            mongodb_uri=_env_str("MONGODB_URI", defaults.mongodb_uri),
            database=_env_str("MONGODB_DATABASE", defaults.database),
            collection=_env_str("MONGODB_COLLECTION", defaults.collection),
            timeout_ms=_env_int("MONGODB_TIMEOUT_MS", defaults.timeout_ms, min_value=1),
            host=_env_str("PLAYERSTATS_HOST", defaults.host),
            port=_env_int("PLAYERSTATS_PORT", defaults.port, min_value=1),
            search_limit=_env_int("PLAYERSTATS_SEARCH_LIMIT", defaults.search_limit, min_value=1),
            search_literal=_env_bool("PLAYERSTATS_SEARCH_LITERAL", defaults.search_literal),
        )

    def with_overrides(self, **changes) -> "Settings":
        """Return a copy with the non-``None`` values in ``changes`` applied."""
        return replace(self, **{key: value for key, value in changes.items() if value is not None})
