from .animals import (
    AnimalTotals,
    animal_summary_for_hole,
    calculate_animal_scores,
    total_animal_counts,
)
from .display import HandicapType, HoleHandicap, StrokeDisplay, get_stroke_display, pair_handicaps
from .h2h import (
    H2HMatch,
    H2HSummary,
    HoleResult,
    MatchResult,
    calculate_h2h,
    calculate_h2h_for_player,
    calculate_h2h_matrix,
    classify_score,
    format_h2h_table,
    score_hole,
)
from .handicap import SegmentStrokes, calculate_handicap_matrix, resolve_strokes_owed
from .scoreboard import PlayerTotals, Scoreboard, build_scoreboard
from .strokes import (
    StrokeAllocation,
    allocate_strokes_for_nine,
    allocation_capacity,
    calculate_stroke_allocation,
)

__all__ = [
    "AnimalTotals",
    "H2HMatch",
    "H2HSummary",
    "HandicapType",
    "HoleHandicap",
    "HoleResult",
    "MatchResult",
    "PlayerTotals",
    "Scoreboard",
    "SegmentStrokes",
    "StrokeAllocation",
    "StrokeDisplay",
    "allocate_strokes_for_nine",
    "allocation_capacity",
    "animal_summary_for_hole",
    "build_scoreboard",
    "calculate_animal_scores",
    "calculate_h2h",
    "calculate_h2h_for_player",
    "calculate_h2h_matrix",
    "calculate_handicap_matrix",
    "calculate_stroke_allocation",
    "classify_score",
    "format_h2h_table",
    "get_stroke_display",
    "pair_handicaps",
    "resolve_strokes_owed",
    "score_hole",
    "total_animal_counts",
]
