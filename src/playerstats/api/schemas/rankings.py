from __future__ import annotations

from pydantic import BaseModel

from playerstats.models import Stat


class RankingEntry(BaseModel):
    strPlayer: str | None = None
    strCutout: str | None = None


class ScorerEntry(RankingEntry):
    Gls: Stat


class GoalkeeperEntry(RankingEntry):
    CS: Stat


class TouchesEntry(RankingEntry):
    Touches: Stat


class AssistEntry(RankingEntry):
    Ast: Stat


class DefenderEntry(RankingEntry):
    tackleEfficiency: str
    Tkl: Stat
    TklW: Stat
    strPosition: str | None = None
