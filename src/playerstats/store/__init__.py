"""Read-only access to the MongoDB player collection."""

from __future__ import annotations

import enum
import logging
import re
import urllib.parse
from typing import Any, Dict, List, Mapping, Optional

from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection

from playerstats.config import (
    DEFENDER_MIN_TACKLES,
    DEFENDER_POSITIONS,
    RankingRules,
    Settings,
    get_ranking,
)


logger = logging.getLogger("uvicorn.error")
logger.setLevel(logging.INFO)

NAME_PROJECTION = {"_id": 0, "strPlayer": 1}
DEFENDER_PROJECTION = {
    "_id": 0,
    "strPlayer": 1,
    "strCutout": 1,
    "Tkl": 1,
    "TklW": 1,
    "strPosition": 1,
}


class StoreState(str, enum.Enum):
    NOT_READY = "not_ready"
    READY = "ready"
    FAILED = "failed"


class StoreNotReadyError(RuntimeError):
    """Raised when the collection is used before the connection is up."""


def present(field: str) -> Dict[str, Any]:
    """Filter matching documents where ``field`` exists and is not null."""
    return {field: {"$exists": True, "$ne": None}}


def name_search_filter(query: str, *, literal: bool = False) -> Dict[str, Any]:
    pattern = re.escape(query) if literal else query
    return {"strPlayer": {"$regex": pattern, "$options": "i"}}


def defender_filter() -> Dict[str, Any]:
    return {
        "strPosition": {"$in": list(DEFENDER_POSITIONS)},
        "Tkl": {"$gt": DEFENDER_MIN_TACKLES},
        **present("TklW"),
    }


def redact_uri(uri: str) -> str:
    parts = urllib.parse.urlsplit(uri)
    if "@" not in parts.netloc:
        return uri
    hosts = parts.netloc.rsplit("@", 1)[1]
    return urllib.parse.urlunsplit(parts._replace(netloc=f"***@{hosts}"))


class PlayerStore:
    """MongoDB-backed player collection with an explicit readiness state."""

    def __init__(self, settings: Settings, collection: Optional[Collection] = None):
        self.settings = settings
        self._client: Optional[MongoClient] = None
        self._collection = collection
        self.state = StoreState.READY if collection is not None else StoreState.NOT_READY

    @classmethod
    def from_collection(cls, collection: Collection, settings: Optional[Settings] = None) -> "PlayerStore":
        return cls(settings or Settings(), collection=collection)

    @property
    def ready(self) -> bool:
        return self.state is StoreState.READY

    @property
    def collection(self) -> Collection:
        if self._collection is None or not self.ready:
            raise StoreNotReadyError("Database connection not ready")
        return self._collection

    def connect(self) -> None:
        """Open the client and verify the server answers a ping.

        The store only becomes ready once the ping succeeds; any failure leaves
        it in the ``FAILED`` state and is re-raised to the caller.
        """
        settings = self.settings
        logger.info(
            "Connecting to MongoDB at %s (db=%s, collection=%s)",
            redact_uri(settings.mongodb_uri),
            settings.database,
            settings.collection,
        )
        client: MongoClient = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.timeout_ms,
        )
        try:
            client.admin.command("ping")
        except Exception:
            self.state = StoreState.FAILED
            client.close()
            raise
        self._client = client
        self._collection = client[settings.database][settings.collection]
        self.state = StoreState.READY
        logger.info("MongoDB connection ready")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            self._collection = None
            self.state = StoreState.NOT_READY

    def search_names(self, query: str, limit: int) -> List[Dict[str, Any]]:
        cursor = self.collection.find(
            name_search_filter(query, literal=self.settings.search_literal),
            NAME_PROJECTION,
        ).limit(limit)
        return list(cursor)

    def find_player(self, name: str) -> Optional[Dict[str, Any]]:
        document = self.collection.find_one({"strPlayer": name})
        if document is None:
            return None
        if "_id" in document:
            document["_id"] = str(document["_id"])
        return document

    def top_by_stat(self, ranking: RankingRules | str) -> List[Mapping[str, Any]]:
        rules = get_ranking(ranking) if isinstance(ranking, str) else ranking
        if rules.stat_field is None:
            raise ValueError(f"Ranking {rules.key} has no stored stat field")
        cursor = (
            self.collection.find(present(rules.stat_field), rules.projection)
            .sort(rules.stat_field, DESCENDING)
            .limit(rules.limit)
        )
        return list(cursor)

    def defenders(self) -> List[Mapping[str, Any]]:
        return list(self.collection.find(defender_filter(), DEFENDER_PROJECTION))


__all__ = [
    "PlayerStore",
    "StoreNotReadyError",
    "StoreState",
    "defender_filter",
    "name_search_filter",
    "present",
    "redact_uri",
]
