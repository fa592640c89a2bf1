from enum import Enum
from pydantic import Field, ValidationError, model_validator
from typing import Dict, List, Optional, Tuple

from .base import BaseGolfModel


class Segment(str, Enum):
    FRONT_NINE = "front9"
    BACK_NINE = "back9"


def segment_for_hole(hole_number: int) -> Segment:
    """Holes 1-9 are the front nine, 10-18 the back nine."""
    return Segment.FRONT_NINE if hole_number <= 9 else Segment.BACK_NINE


class HandicapOverride(BaseGolfModel):
    """Strokes ``from_player_id`` gives ``to_player_id`` on one nine.

    A negative value means strokes flow the other way.
    """
    from_player_id: str
    to_player_id: str
    segment: Segment
    strokes: int = Field(0, ge=-10, le=10)

    @property
    def key(self) -> Tuple[str, str, Segment]:
        return (self.from_player_id, self.to_player_id, self.segment)


class HandicapOverrides(BaseGolfModel):
    """Host-authored pairwise stroke table, keyed by (from, to, segment).

    Each entry's reciprocal, when stored, must be its exact negation, so a pair
    never owes strokes in both directions on the same nine.
    """
    entries: List[HandicapOverride] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_reciprocal_entries(self):
        table: Dict[Tuple[str, str, Segment], int] = {}
        for entry in self.entries:
            if entry.from_player_id == entry.to_player_id:
                raise ValueError(f"Player {entry.from_player_id} cannot give strokes to themselves")
            if entry.key in table:
                raise ValueError(
                    f"Duplicate handicap entry {entry.from_player_id} -> "
                    f"{entry.to_player_id} ({entry.segment.value})"
                )
            table[entry.key] = entry.strokes

        for (from_id, to_id, segment), strokes in table.items():
            reciprocal = table.get((to_id, from_id, segment))
            if reciprocal is not None and reciprocal != -strokes:
                raise ValueError(
                    f"Handicap {from_id} -> {to_id} ({segment.value}) is {strokes} "
                    f"but the reverse is {reciprocal}; expected {-strokes}"
                )
        return self

    def _find(self, from_id: str, to_id: str, segment: Segment) -> Optional[HandicapOverride]:
        for entry in self.entries:
            if entry.key == (from_id, to_id, segment):
                return entry
        return None

    def get_strokes(self, from_id: str, to_id: str, segment: Segment) -> int:
        """Signed strokes from one player to another, read from either direction."""
        entry = self._find(from_id, to_id, segment)
        if entry is not None:
            return entry.strokes
        reverse = self._find(to_id, from_id, segment)
        if reverse is not None:
            return -reverse.strokes
        return 0

    def strokes_owed(self, from_id: str, to_id: str, segment: Segment) -> int:
        """Non-negative strokes owed; the receiving side of a pair resolves to 0."""
        return max(0, self.get_strokes(from_id, to_id, segment))

    def set_strokes(self, from_id: str, to_id: str, segment: Segment, strokes: int) -> Optional[str]:
        """Set a pair's strokes for one nine, writing both directions.

        Returns error message if validation fails.
        """
        kept = [
            e for e in self.entries
            if e.key not in ((from_id, to_id, segment), (to_id, from_id, segment))
        ]
        try:
            new_entries = kept + [
                HandicapOverride(from_player_id=from_id, to_player_id=to_id,
                                 segment=segment, strokes=strokes),
                HandicapOverride(from_player_id=to_id, to_player_id=from_id,
                                 segment=segment, strokes=-strokes),
            ]
        except ValidationError as e:
            return e.errors()[0]['msg']
        return self.update_field('entries', new_entries)

    def player_ids(self) -> List[str]:
        seen: List[str] = []
        for entry in self.entries:
            for pid in (entry.from_player_id, entry.to_player_id):
                if pid not in seen:
                    seen.append(pid)
        return seen
