"""Derived rankings computed in the service rather than in the store."""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from playerstats.config import TOP_LIMIT
from playerstats.models import PlayerStats, Stat


def tackle_efficiency(tackles: Stat, tackles_won: Stat) -> float:
    """Percentage of attempted tackles that were won, rounded to 2 places."""
    return round(tackles_won / tackles * 100, 2)


def format_efficiency(value: float) -> str:
    return f"{value:.2f}"


def rank_defenders(documents: Iterable[Mapping[str, Any]], limit: int = TOP_LIMIT) -> List[dict[str, Any]]:
    """Order defenders by tackle efficiency, best first.

    Every document is expected to have passed the defender filter already.
    Records that still lack tackle counts are skipped. The sort is stable, so
    equal efficiencies keep the order the store returned them in.
    """
    scored: list[tuple[float, dict[str, Any]]] = []
    for document in documents:
        player = PlayerStats.model_validate(document)
        if not player.Tkl or player.TklW is None:
            continue
        efficiency = tackle_efficiency(player.Tkl, player.TklW)
        entry = {
            "strPlayer": player.strPlayer,
            "tackleEfficiency": format_efficiency(efficiency),
            "Tkl": player.Tkl,
            "TklW": player.TklW,
            "strPosition": player.strPosition,
        }
        if player.strCutout is not None:
            entry["strCutout"] = player.strCutout
        scored.append((efficiency, entry))
    scored.sort(key=lambda item: item[0], reverse=True)
    return [entry for _, entry in scored[:limit]]
