"""Per-hole handicap stroke allocation."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from models import Course, HandicapOverrides, Hole, Player, Segment, TurboValues, segment_for_hole
from scoring.handicap import resolve_strokes_owed

logger = logging.getLogger(__name__)

MAX_STROKES_PER_HOLE = 2


class PairAllocation(BaseModel):
    """Strokes one player gives another, hole number -> 1 or 2, per nine."""
    front9: Dict[int, int] = Field(default_factory=dict)
    back9: Dict[int, int] = Field(default_factory=dict)

    def for_segment(self, segment: Segment) -> Dict[int, int]:
        return self.front9 if segment == Segment.FRONT_NINE else self.back9


class UnallocatedStrokes(BaseModel):
    """Owed strokes that did not fit on a nine (more than two per eligible hole)."""
    from_player_id: str
    to_player_id: str
    segment: Segment
    owed: int
    allocated: int

    @property
    def dropped(self) -> int:
        return self.owed - self.allocated


class StrokeAllocation(BaseModel):
    """Stroke allocation for every ordered player pair: pairs[from][to]."""
    pairs: Dict[str, Dict[str, PairAllocation]] = Field(default_factory=dict)
    unallocated: List[UnallocatedStrokes] = Field(default_factory=list)

    def strokes_for(self, from_player_id: str, to_player_id: str, hole_number: int) -> int:
        """Strokes ``from_player_id`` gives ``to_player_id`` on a hole (0 if none)."""
        pair = self.pairs.get(from_player_id, {}).get(to_player_id)
        if pair is None:
            return 0
        return pair.for_segment(segment_for_hole(hole_number)).get(hole_number, 0)


def _eligible_holes(holes: Iterable[Hole], turbo: TurboValues) -> List[Hole]:
    return [h for h in holes if not turbo.is_turbo(h.number)]


def allocation_capacity(holes: Iterable[Hole], turbo: Optional[TurboValues] = None) -> int:
    """Most strokes a nine can carry: two per non-turbo hole."""
    turbo = turbo or TurboValues()
    return MAX_STROKES_PER_HOLE * len(_eligible_holes(holes, turbo))


def allocate_strokes_for_nine(
    strokes: int,
    holes: Iterable[Hole],
    turbo: Optional[TurboValues] = None,
) -> Dict[int, int]:
    """
    Spread owed strokes across one nine.

    Turbo holes are skipped. Par 4/5 holes come first by ascending HC, then
    par 3s by ascending HC. The first pass gives one stroke per hole; the
    second pass tops holes up to two in the same group order. Strokes beyond
    two per eligible hole are not allocated.
    """
    if strokes <= 0:
        return {}

    turbo = turbo or TurboValues()
    normal_holes = _eligible_holes(holes, turbo)
    if not normal_holes:
        return {}

    long_holes = sorted((h for h in normal_holes if h.par >= 4), key=lambda h: h.handicap)
    par3_holes = sorted((h for h in normal_holes if h.par == 3), key=lambda h: h.handicap)
    ordered = long_holes + par3_holes

    allocation: Dict[int, int] = {}
    remaining = strokes

    for hole in ordered:
        if remaining == 0:
            break
        allocation[hole.number] = 1
        remaining -= 1

    for hole in ordered:
        if remaining == 0:
            break
        if allocation.get(hole.number) == 1:
            allocation[hole.number] = MAX_STROKES_PER_HOLE
            remaining -= 1

    return allocation


def calculate_stroke_allocation(
    players: Iterable[Player],
    course: Course,
    turbo: Optional[TurboValues] = None,
    overrides: Optional[HandicapOverrides] = None,
) -> StrokeAllocation:
    """Allocate strokes on both nines for every ordered pair of players."""
    players = list(players)
    turbo = turbo or TurboValues()
    owed = resolve_strokes_owed(players, overrides)
    nines = {Segment.FRONT_NINE: course.front_nine, Segment.BACK_NINE: course.back_nine}

    result = StrokeAllocation()
    for from_id, row in owed.items():
        for to_id, segment_strokes in row.items():
            pair = PairAllocation()
            for segment, holes in nines.items():
                strokes = segment_strokes.for_segment(segment)
                allocated = allocate_strokes_for_nine(strokes, holes, turbo)
                if segment == Segment.FRONT_NINE:
                    pair.front9 = allocated
                else:
                    pair.back9 = allocated

                given = sum(allocated.values())
                if given < strokes:
                    logger.warning(
                        "Dropped %d of %d strokes %s -> %s on %s: only %d non-turbo holes",
                        strokes - given, strokes, from_id, to_id, segment.value,
                        len(_eligible_holes(holes, turbo)),
                    )
                    result.unallocated.append(UnallocatedStrokes(
                        from_player_id=from_id,
                        to_player_id=to_id,
                        segment=segment,
                        owed=strokes,
                        allocated=given,
                    ))
            result.pairs.setdefault(from_id, {})[to_id] = pair

    return result
