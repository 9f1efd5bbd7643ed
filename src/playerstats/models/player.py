"""Typed view over the semi-structured player documents."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel
from pydantic.config import ConfigDict


Stat = Union[int, float]


class PlayerStats(BaseModel):
    """Player document with every statistic optional.

    A statistic that is missing from the document and one stored as null both
    load as ``None``; rankings treat either as "not eligible".
    """

    strPlayer: Optional[str] = None
    strCutout: Optional[str] = None
    strPosition: Optional[str] = None
    Gls: Optional[Stat] = None
    CS: Optional[Stat] = None
    Tkl: Optional[Stat] = None
    TklW: Optional[Stat] = None
    Touches: Optional[Stat] = None
    Ast: Optional[Stat] = None

    model_config = ConfigDict(frozen=True, extra="allow")

    def has_stat(self, field: str) -> bool:
        return getattr(self, field, None) is not None
