"""Conversion between asyncpg database rows and Pydantic game models.

Centralizes all mapping logic between the game tables and the snapshot
handed to the scoring engine.
"""

from typing import Dict, List, Optional, Tuple

from models import (
    AnimalScore,
    Course,
    GameSnapshot,
    HandicapOverride,
    HandicapOverrides,
    Hole,
    HoleScore,
    Player,
    ScoringConfig,
    Segment,
    TurboValues,
)


# ================================================================
# Row -> Model (reads)
# ================================================================

def player_from_row(row) -> Player:
    """players row -> Player model."""
    return Player(
        id=str(row["id"]),
        name=row["username"],
        role=row["role"],
        handicap=row["handicap"],
    )


def hole_from_row(row) -> Hole:
    """course_holes row -> Hole model."""
    return Hole(
        number=row["hole_number"],
        par=row["par"],
        handicap=row["handicap"],
    )


def course_from_rows(game_row, hole_rows: list) -> Course:
    """games row + course_holes rows -> Course model."""
    return Course(
        id=str(game_row["course_id"]) if game_row["course_id"] else None,
        name=game_row["course_name"],
        holes=[hole_from_row(r) for r in hole_rows],
    )


def turbo_from_rows(rows: list) -> TurboValues:
    """game_turbo rows -> TurboValues."""
    return TurboValues(multipliers={r["hole_number"]: r["multiplier"] for r in rows})


def hole_score_from_row(row) -> HoleScore:
    """scores row -> HoleScore model."""
    return HoleScore(
        player_id=str(row["player_id"]),
        hole_number=row["hole_number"],
        strokes=row["score"],
    )


def scoring_config_from_row(row) -> ScoringConfig:
    """game_scoring_config row -> ScoringConfig. Missing row means defaults."""
    if row is None:
        return ScoringConfig()
    return ScoringConfig(
        hole_in_one=row["hole_in_one"],
        albatross=row["albatross"],
        eagle=row["eagle"],
        birdie=row["birdie"],
        par_or_worse=row["par_or_worse"],
    )


def overrides_from_rows(rows: list) -> Optional[HandicapOverrides]:
    """game_handicap_h2h rows -> HandicapOverrides, or None when the host never set any.

    Each row carries both nines for one direction of a pair.
    """
    if not rows:
        return None
    entries: List[HandicapOverride] = []
    for r in rows:
        for segment, column in ((Segment.FRONT_NINE, "front9_strokes"),
                                (Segment.BACK_NINE, "back9_strokes")):
            entries.append(HandicapOverride(
                from_player_id=str(r["from_player_id"]),
                to_player_id=str(r["to_player_id"]),
                segment=segment,
                strokes=r[column] or 0,
            ))
    return HandicapOverrides(entries=entries)


def animal_score_from_row(row) -> AnimalScore:
    """animal_scores row -> AnimalScore model."""
    return AnimalScore(
        player_id=str(row["player_id"]),
        hole_number=row["hole_number"],
        animal_type=row["animal_type"],
        count=row["count"],
    )


def snapshot_from_rows(
    game_row,
    hole_rows: list,
    player_rows: list,
    turbo_rows: list,
    score_rows: list,
    handicap_rows: list,
    config_row,
    animal_rows: list,
) -> GameSnapshot:
    """Assemble a full GameSnapshot from rows across the game tables."""
    return GameSnapshot(
        game_id=str(game_row["id"]),
        course=course_from_rows(game_row, hole_rows),
        players=[player_from_row(r) for r in player_rows],
        turbo=turbo_from_rows(turbo_rows),
        scores=[hole_score_from_row(r) for r in score_rows],
        overrides=overrides_from_rows(handicap_rows),
        scoring_config=scoring_config_from_row(config_row),
        animal_scores=[animal_score_from_row(r) for r in animal_rows if r["count"]],
    )


# ================================================================
# Model -> Row (writes)
# ================================================================

def turbo_to_rows(game_id: int, turbo: TurboValues) -> List[Tuple]:
    """TurboValues -> (game_id, hole_number, multiplier) tuples for all 18 holes."""
    return [(game_id, hole, turbo.get(hole)) for hole in range(1, 19)]


def scoring_config_to_row(config: ScoringConfig) -> Dict:
    return {
        "hole_in_one": config.hole_in_one,
        "albatross": config.albatross,
        "eagle": config.eagle,
        "birdie": config.birdie,
        "par_or_worse": config.par_or_worse,
    }


def overrides_to_rows(game_id: int, overrides: HandicapOverrides) -> List[Tuple]:
    """HandicapOverrides -> (game_id, from, to, front9, back9) tuples, both directions per pair."""
    pairs: Dict[Tuple[str, str], None] = {}
    for entry in overrides.entries:
        pairs[(entry.from_player_id, entry.to_player_id)] = None
        pairs[(entry.to_player_id, entry.from_player_id)] = None

    return [
        (
            game_id,
            int(from_id),
            int(to_id),
            overrides.get_strokes(from_id, to_id, Segment.FRONT_NINE),
            overrides.get_strokes(from_id, to_id, Segment.BACK_NINE),
        )
        for from_id, to_id in pairs
    ]
