"""Ordered-pair strokes owed, derived from player handicaps or a host override table."""

from __future__ import annotations

from typing import Dict, Iterable, NamedTuple, Optional

from models import HandicapOverrides, Player, Segment


class SegmentStrokes(NamedTuple):
    front9: int = 0
    back9: int = 0

    def for_segment(self, segment: Segment) -> int:
        return self.front9 if segment == Segment.FRONT_NINE else self.back9


def calculate_handicap_matrix(players: Iterable[Player]) -> Dict[str, Dict[str, int]]:
    """
    Strokes each player gives every other player, from handicap differences.

    matrix[a][b] = max(0, handicap[a] - handicap[b]); the diagonal is 0.
    """
    players = list(players)
    matrix: Dict[str, Dict[str, int]] = {}
    for from_player in players:
        row = matrix.setdefault(from_player.id, {})
        for to_player in players:
            if from_player.id == to_player.id:
                row[to_player.id] = 0
            else:
                row[to_player.id] = max(0, from_player.handicap - to_player.handicap)
    return matrix


def resolve_strokes_owed(
    players: Iterable[Player],
    overrides: Optional[HandicapOverrides] = None,
) -> Dict[str, Dict[str, SegmentStrokes]]:
    """
    Strokes owed per ordered pair and per nine.

    An override table replaces the derived matrix for the whole game. The
    derived path gives the full handicap difference on each nine.
    """
    players = list(players)
    if overrides is not None:
        owed: Dict[str, Dict[str, SegmentStrokes]] = {}
        for from_player in players:
            row = owed.setdefault(from_player.id, {})
            for to_player in players:
                if from_player.id == to_player.id:
                    row[to_player.id] = SegmentStrokes()
                    continue
                row[to_player.id] = SegmentStrokes(
                    front9=overrides.strokes_owed(from_player.id, to_player.id, Segment.FRONT_NINE),
                    back9=overrides.strokes_owed(from_player.id, to_player.id, Segment.BACK_NINE),
                )
        return owed

    matrix = calculate_handicap_matrix(players)
    return {
        from_id: {to_id: SegmentStrokes(strokes, strokes) for to_id, strokes in row.items()}
        for from_id, row in matrix.items()
    }
