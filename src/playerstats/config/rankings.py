"""Ranking views exposed by the statistics API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple


DEFENDER_POSITIONS: Tuple[str, ...] = ("Center-Back", "Left-Back", "Right-Back")
DEFENDER_MIN_TACKLES = 20
TOP_LIMIT = 20


@dataclass(frozen=True)
class RankingRules:
    key: str
    path: str
    stat_field: Optional[str]
    summary: str
    limit: int = TOP_LIMIT

    @property
    def projection(self) -> Dict[str, int]:
        fields = {"_id": 0, "strPlayer": 1, "strCutout": 1}
        if self.stat_field is not None:
            fields[self.stat_field] = 1
        return fields


_RANKINGS: Dict[str, RankingRules] = {
    "scorers": RankingRules(
        key="scorers",
        path="/top-goleadores",
        stat_field="Gls",
        summary="Top goal scorers",
    ),
    "goalkeepers": RankingRules(
        key="goalkeepers",
        path="/top-goleros",
        stat_field="CS",
        summary="Goalkeepers with the most clean sheets",
    ),
    # Ranked by a derived field, so the store query carries no sort or limit.
    "defenders": RankingRules(
        key="defenders",
        path="/top-defensas",
        stat_field=None,
        summary="Defenders with the best tackle efficiency",
    ),
    "touches": RankingRules(
        key="touches",
        path="/top-touches",
        stat_field="Touches",
        summary="Players with the most ball touches",
    ),
    "assists": RankingRules(
        key="assists",
        path="/top-asistidores",
        stat_field="Ast",
        summary="Top assist providers",
    ),
}


def get_ranking(key: str) -> RankingRules:
    try:
        return _RANKINGS[key.lower()]
    except KeyError as exc:
        raise KeyError(f"Unsupported ranking: {key}") from exc


def iter_rankings() -> Iterable[RankingRules]:
    return _RANKINGS.values()
