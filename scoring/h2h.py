"""
Head-to-head match points.

Each hole is scored on its own: net scores decide WIN/LOSE/TIE, the gross
score that decided the hole picks the point tier from the game's
ScoringConfig, and the hole's turbo multiplier scales the result.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, Field

from models import GameSnapshot, Hole, ScoreType, ScoringConfig, TurboValues
from scoring.display import HandicapType, HoleHandicap, pair_handicaps
from scoring.strokes import StrokeAllocation, calculate_stroke_allocation

logger = logging.getLogger(__name__)


class MatchResult(str, Enum):
    WIN = "WIN"
    LOSE = "LOSE"
    TIE = "TIE"
    PENDING = "PENDING"


class HoleResult(BaseModel):
    hole: int
    par: int
    turbo: int = 1
    player_gross: Optional[int] = None
    opponent_gross: Optional[int] = None
    player_net: Optional[int] = None
    opponent_net: Optional[int] = None
    handicap: HoleHandicap = Field(default_factory=HoleHandicap)
    score_type: Optional[ScoreType] = None
    base_point: int = 0
    hole_point: int = 0
    result: MatchResult = MatchResult.PENDING
    player_delta: int = 0


class H2HSummary(BaseModel):
    total_points: int = 0
    win_count: int = 0
    lose_count: int = 0
    tie_count: int = 0
    pending_count: int = 0

    def record(self, hole_result: HoleResult) -> None:
        self.total_points += hole_result.player_delta
        if hole_result.result == MatchResult.WIN:
            self.win_count += 1
        elif hole_result.result == MatchResult.LOSE:
            self.lose_count += 1
        elif hole_result.result == MatchResult.TIE:
            self.tie_count += 1
        else:
            self.pending_count += 1


class H2HMatch(BaseModel):
    player_id: str
    opponent_id: str
    player_name: Optional[str] = None
    opponent_name: Optional[str] = None
    holes: List[HoleResult] = Field(default_factory=list)
    summary: H2HSummary = Field(default_factory=H2HSummary)


def classify_score(gross: int, par: int) -> ScoreType:
    """Point tier for a gross score. A par-3 ace is a hole-in-one, not an albatross."""
    if par == 3 and gross == 1:
        return ScoreType.HOLE_IN_ONE
    if gross <= par - 3:
        return ScoreType.ALBATROSS
    if gross == par - 2:
        return ScoreType.EAGLE
    if gross == par - 1:
        return ScoreType.BIRDIE
    return ScoreType.PAR_OR_WORSE


def _net_scores(player_gross: int, opponent_gross: int, handicap: HoleHandicap):
    if handicap.type == HandicapType.GIVE:
        return player_gross, opponent_gross - handicap.value
    if handicap.type == HandicapType.GET:
        return player_gross - handicap.value, opponent_gross
    return player_gross, opponent_gross


def score_hole(
    hole: Hole,
    player_gross: Optional[int],
    opponent_gross: Optional[int],
    handicap: Optional[HoleHandicap] = None,
    turbo: int = 1,
    config: Optional[ScoringConfig] = None,
) -> HoleResult:
    """Score one hole for the focus player against one opponent."""
    handicap = handicap or HoleHandicap()
    config = config or ScoringConfig()
    par = hole.par

    if not player_gross or not opponent_gross:
        return HoleResult(hole=hole.number, par=par, turbo=turbo, handicap=handicap)

    player_net, opponent_net = _net_scores(player_gross, opponent_gross, handicap)

    if player_net < opponent_net:
        result = MatchResult.WIN
    elif player_net > opponent_net:
        result = MatchResult.LOSE
    else:
        result = MatchResult.TIE

    # A loss is valued by the opponent's winning score
    deciding_gross = opponent_gross if result == MatchResult.LOSE else player_gross
    score_type = classify_score(deciding_gross, par)
    base_point = config.points_for(score_type)
    hole_point = base_point * turbo
    par_point = config.points_for(ScoreType.PAR_OR_WORSE)

    if result == MatchResult.WIN:
        player_delta = hole_point
    elif result == MatchResult.LOSE:
        player_delta = -hole_point
    elif opponent_gross < par:
        # Tied on net, but the opponent's sub-par gross still costs the excess over a par
        penalty_point = config.points_for(classify_score(opponent_gross, par)) * turbo
        player_delta = -(penalty_point - par_point * turbo)
    elif handicap.type != HandicapType.NONE and player_gross < par:
        player_delta = (base_point - par_point) * turbo
    else:
        player_delta = 0

    return HoleResult(
        hole=hole.number,
        par=par,
        turbo=turbo,
        player_gross=player_gross,
        opponent_gross=opponent_gross,
        player_net=player_net,
        opponent_net=opponent_net,
        handicap=handicap,
        score_type=score_type,
        base_point=base_point,
        hole_point=hole_point,
        result=result,
        player_delta=player_delta,
    )


def calculate_h2h(
    holes: Iterable[Hole],
    player_scores: Mapping[int, Optional[int]],
    opponent_scores: Mapping[int, Optional[int]],
    handicaps: Optional[Mapping[int, HoleHandicap]] = None,
    turbo: Optional[TurboValues] = None,
    config: Optional[ScoringConfig] = None,
    *,
    player_id: str = "player",
    opponent_id: str = "opponent",
    player_name: Optional[str] = None,
    opponent_name: Optional[str] = None,
) -> H2HMatch:
    """Score every hole for one ordered pair and tally the results."""
    handicaps = handicaps or {}
    turbo = turbo or TurboValues()
    config = config or ScoringConfig()

    match = H2HMatch(
        player_id=player_id,
        opponent_id=opponent_id,
        player_name=player_name,
        opponent_name=opponent_name,
    )
    for hole in holes:
        hole_result = score_hole(
            hole,
            player_scores.get(hole.number),
            opponent_scores.get(hole.number),
            handicaps.get(hole.number),
            turbo.get(hole.number),
            config,
        )
        match.holes.append(hole_result)
        match.summary.record(hole_result)
    return match


def calculate_h2h_for_player(
    snapshot: GameSnapshot,
    player_id: str,
    allocation: Optional[StrokeAllocation] = None,
) -> Dict[str, H2HMatch]:
    """Head-to-head result of ``player_id`` against every other player, keyed by opponent id."""
    if allocation is None:
        allocation = calculate_stroke_allocation(
            snapshot.players, snapshot.course, snapshot.turbo, snapshot.overrides
        )

    player = snapshot.get_player(player_id)
    player_scores = snapshot.gross_scores(player_id)
    matches: Dict[str, H2HMatch] = {}
    for opponent in snapshot.players:
        if opponent.id == player_id:
            continue
        match = calculate_h2h(
            snapshot.course.holes,
            player_scores,
            snapshot.gross_scores(opponent.id),
            pair_handicaps(allocation, player_id, opponent.id, snapshot.course.holes),
            snapshot.turbo,
            snapshot.scoring_config,
            player_id=player_id,
            opponent_id=opponent.id,
            player_name=player.name if player else None,
            opponent_name=opponent.name,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("\n%s", format_h2h_table(match))
        matches[opponent.id] = match
    return matches


def calculate_h2h_matrix(snapshot: GameSnapshot) -> Dict[str, Dict[str, H2HSummary]]:
    """H2H summary for every ordered pair: matrix[player][opponent]."""
    allocation = calculate_stroke_allocation(
        snapshot.players, snapshot.course, snapshot.turbo, snapshot.overrides
    )
    return {
        player.id: {
            opponent_id: match.summary
            for opponent_id, match in calculate_h2h_for_player(snapshot, player.id, allocation).items()
        }
        for player in snapshot.players
    }


def _signed(value: int) -> str:
    return f"+{value}" if value >= 0 else str(value)


def _cell(value: Optional[int]) -> str:
    return "-" if value is None else str(value)


def format_h2h_table(match: H2HMatch) -> str:
    """Plain-text hole-by-hole breakdown of a match, for logs and debugging."""
    player = match.player_name or match.player_id
    opponent = match.opponent_name or match.opponent_id
    lines = [
        f"=== {player} vs {opponent} ===",
        "Hole | Par | Turbo | PGross | OGross | PNet | ONet | HC      | Type       | Base | Point | Result  | Delta",
    ]
    for h in match.holes:
        score_type = h.score_type.value if h.score_type else "-"
        lines.append(
            f"H{h.hole:>2}  | {h.par:>3} | x{h.turbo:<4} | {_cell(h.player_gross):>6} | "
            f"{_cell(h.opponent_gross):>6} | {_cell(h.player_net):>4} | {_cell(h.opponent_net):>4} | "
            f"{h.handicap.label:<7} | {score_type:<10} | {h.base_point:>4} | {h.hole_point:>5} | "
            f"{h.result.value:<7} | {_signed(h.player_delta)}"
        )
    s = match.summary
    lines.append(f"Total Points: {_signed(s.total_points)}")
    lines.append(
        f"WIN: {s.win_count} | LOSE: {s.lose_count} | TIE: {s.tie_count} | PENDING: {s.pending_count}"
    )
    return "\n".join(lines)
