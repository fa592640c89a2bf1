"""Full derived view of a game for one viewing player."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from models import GameSnapshot, ScoringConfig
from scoring.animals import AnimalTotals, calculate_animal_scores
from scoring.display import StrokeDisplay, get_stroke_display
from scoring.h2h import H2HMatch, calculate_h2h_for_player
from scoring.strokes import UnallocatedStrokes, calculate_stroke_allocation


class PlayerTotals(BaseModel):
    """Running gross totals. ``to_par`` only counts holes already played."""
    player_id: str
    player_name: Optional[str] = None
    front9: Optional[int] = None
    back9: Optional[int] = None
    total: Optional[int] = None
    holes_played: int = 0
    to_par: Optional[int] = None


class Scoreboard(BaseModel):
    game_id: Optional[str] = None
    focus_player_id: str
    turbo: Dict[int, int] = Field(default_factory=dict)
    turbo_preset: str = "custom"
    scoring_config: ScoringConfig = Field(default_factory=ScoringConfig)
    totals: List[PlayerTotals] = Field(default_factory=list)
    stroke_indicators: Dict[str, Dict[int, StrokeDisplay]] = Field(default_factory=dict)
    h2h: Dict[str, H2HMatch] = Field(default_factory=dict)
    animals: Dict[str, AnimalTotals] = Field(default_factory=dict)
    unallocated: List[UnallocatedStrokes] = Field(default_factory=list)


def _sum_or_none(values: List[int]) -> Optional[int]:
    return sum(values) if values else None


def player_totals(snapshot: GameSnapshot, player_id: str) -> PlayerTotals:
    """Front nine, back nine and total gross strokes for one player."""
    player = snapshot.get_player(player_id)
    gross = {hole: s for hole, s in snapshot.gross_scores(player_id).items() if s}

    front = [s for hole, s in gross.items() if hole <= 9]
    back = [s for hole, s in gross.items() if hole > 9]
    played_par = [
        snapshot.course.get_hole(hole).par
        for hole in gross
        if snapshot.course.get_hole(hole) is not None
    ]
    total = _sum_or_none(front + back)

    to_par = None
    if total is not None and len(played_par) == len(gross):
        to_par = total - sum(played_par)

    return PlayerTotals(
        player_id=player_id,
        player_name=player.name if player else None,
        front9=_sum_or_none(front),
        back9=_sum_or_none(back),
        total=total,
        holes_played=len(gross),
        to_par=to_par,
    )


def build_scoreboard(snapshot: GameSnapshot, focus_player_id: str) -> Scoreboard:
    """
    Recompute everything a viewer sees from a game snapshot.

    The focus player's stroke indicators and head-to-head results are shown
    against every other player's column.
    """
    allocation = calculate_stroke_allocation(
        snapshot.players, snapshot.course, snapshot.turbo, snapshot.overrides
    )

    indicators: Dict[str, Dict[int, StrokeDisplay]] = {}
    for player in snapshot.players:
        if player.id == focus_player_id:
            continue
        indicators[player.id] = {
            hole.number: get_stroke_display(allocation, focus_player_id, player.id, hole.number)
            for hole in snapshot.course.holes
        }

    return Scoreboard(
        game_id=snapshot.game_id,
        focus_player_id=focus_player_id,
        turbo={hole.number: snapshot.turbo.get(hole.number) for hole in snapshot.course.holes},
        turbo_preset=snapshot.turbo.detect_preset(),
        scoring_config=snapshot.scoring_config,
        totals=[player_totals(snapshot, p.id) for p in snapshot.players],
        stroke_indicators=indicators,
        h2h=calculate_h2h_for_player(snapshot, focus_player_id, allocation),
        animals=calculate_animal_scores(snapshot.animal_scores, snapshot.players, snapshot.turbo),
        unallocated=allocation.unallocated,
    )
