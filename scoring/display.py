"""Stroke indicators from one player's point of view."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterable

from pydantic import BaseModel

from models import Hole
from scoring.strokes import StrokeAllocation


class StrokeDisplay(BaseModel):
    """Signed stroke count for a scorecard cell: negative when giving, positive when receiving."""
    count: int = 0
    marker: str = ""
    color: str = ""

    @property
    def is_giving(self) -> bool:
        return self.count < 0

    @property
    def is_receiving(self) -> bool:
        return self.count > 0


class HandicapType(str, Enum):
    NONE = "None"
    GIVE = "Give"
    GET = "Get"


class HoleHandicap(BaseModel):
    """Handicap relationship on one hole, from the focus player's side."""
    type: HandicapType = HandicapType.NONE
    value: int = 0

    @classmethod
    def from_display(cls, display: StrokeDisplay) -> "HoleHandicap":
        if display.count < 0:
            return cls(type=HandicapType.GIVE, value=-display.count)
        if display.count > 0:
            return cls(type=HandicapType.GET, value=display.count)
        return cls()

    @property
    def label(self) -> str:
        if self.type == HandicapType.NONE:
            return self.type.value
        return f"{self.type.value} {self.value}"


def _marker(strokes: int) -> str:
    return "*" if strokes == 1 else "**"


def get_stroke_display(
    allocation: StrokeAllocation,
    view_player_id: str,
    target_player_id: str,
    hole_number: int,
) -> StrokeDisplay:
    """
    Resolve the stroke indicator for ``target_player_id``'s column as seen by
    ``view_player_id``. Giving strokes shows red, receiving shows green.
    """
    if view_player_id == target_player_id:
        return StrokeDisplay()

    giving = allocation.strokes_for(view_player_id, target_player_id, hole_number)
    receiving = allocation.strokes_for(target_player_id, view_player_id, hole_number)

    if giving > 0:
        return StrokeDisplay(count=-giving, marker=_marker(giving), color="red")
    if receiving > 0:
        return StrokeDisplay(count=receiving, marker=_marker(receiving), color="green")
    return StrokeDisplay()


def hole_handicap(
    allocation: StrokeAllocation,
    player_id: str,
    opponent_id: str,
    hole_number: int,
) -> HoleHandicap:
    return HoleHandicap.from_display(
        get_stroke_display(allocation, player_id, opponent_id, hole_number)
    )


def pair_handicaps(
    allocation: StrokeAllocation,
    player_id: str,
    opponent_id: str,
    holes: Iterable[Hole],
) -> Dict[int, HoleHandicap]:
    """Handicap relationship per hole for a player against one opponent."""
    return {
        hole.number: hole_handicap(allocation, player_id, opponent_id, hole.number)
        for hole in holes
    }
