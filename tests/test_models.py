import pytest
from pydantic import ValidationError

from models import (
    AnimalScore,
    AnimalType,
    Course,
    GameSnapshot,
    HandicapOverride,
    HandicapOverrides,
    Hole,
    HoleScore,
    Player,
    PlayerRole,
    ScoreType,
    ScoringConfig,
    Segment,
    TurboValues,
    segment_for_hole,
)


# ================================================================
# Hole / Course
# ================================================================

def test_hole_validation():
    h = Hole(number=1, par=4, handicap=18)
    assert h.number == 1
    assert h.is_front_nine

    with pytest.raises(ValidationError):
        Hole(number=1, par=7, handicap=1)      # par > 6

    with pytest.raises(ValidationError):
        Hole(number=1, par=4, handicap=19)     # HC > 18

    with pytest.raises(ValidationError):
        Hole(number=19, par=4, handicap=1)     # hole > 18


def test_course_nines_and_par():
    holes = [Hole(number=i, par=4, handicap=i) for i in range(18, 0, -1)]
    course = Course(name="Test Course", holes=holes)

    # Holes are kept in hole-number order
    assert [h.number for h in course.holes] == list(range(1, 19))
    assert [h.number for h in course.front_nine] == list(range(1, 10))
    assert [h.number for h in course.back_nine] == list(range(10, 19))
    assert course.front_nine_par == 36
    assert course.back_nine_par == 36
    assert course.par == 72
    assert course.get_hole(12).handicap == 12
    assert course.get_hole(19) is None


def test_course_rejects_duplicate_holes():
    with pytest.raises(ValidationError):
        Course(holes=[Hole(number=1, par=4, handicap=1), Hole(number=1, par=3, handicap=2)])


def test_empty_course_par_is_none():
    course = Course()
    assert course.par is None
    assert course.front_nine_par is None


# ================================================================
# Player
# ================================================================

def test_player_handicap_defaults_and_range():
    assert Player(id="p1").handicap == 0
    assert Player(id="p1", handicap=None).handicap == 0
    assert Player(id="p1", handicap=54).handicap == 54

    with pytest.raises(ValidationError):
        Player(id="p1", handicap=55)

    with pytest.raises(ValidationError):
        Player(id="p1", handicap=-1)


def test_player_role_and_update_field():
    host = Player(id="h", name="Host", role="host")
    assert host.role == PlayerRole.HOST
    assert host.is_host
    assert not Player(id="g").is_host

    # Valid edit returns None, invalid edit returns the validation message
    assert host.update_field("handicap", 12) is None
    assert host.handicap == 12
    error = host.update_field("handicap", 99)
    assert error is not None
    assert host.handicap == 12


def test_hole_score_to_par():
    assert HoleScore(player_id="p1", hole_number=1, strokes=5).to_par(4) == 1
    assert HoleScore(player_id="p1", hole_number=1).to_par(4) is None

    with pytest.raises(ValidationError):
        HoleScore(player_id="p1", hole_number=1, strokes=0)


# ================================================================
# TurboValues
# ================================================================

def test_turbo_defaults_to_one():
    turbo = TurboValues(multipliers={9: 2})
    assert turbo.get(9) == 2
    assert turbo.get(1) == 1
    assert turbo.is_turbo(9)
    assert not turbo.is_turbo(1)


def test_turbo_validation():
    with pytest.raises(ValidationError):
        TurboValues(multipliers={19: 2})

    with pytest.raises(ValidationError):
        TurboValues(multipliers={3: 0})

    turbo = TurboValues()
    assert turbo.set_multiplier(5, 3) is None
    assert turbo.get(5) == 3
    assert turbo.set_multiplier(5, 0) is not None
    assert turbo.get(5) == 3


def test_turbo_presets():
    turbo = TurboValues.from_preset("curve")
    assert turbo.get(8) == 3
    assert turbo.get(18) == 4
    assert turbo.get(1) == 1
    assert turbo.detect_preset() == "curve"

    assert TurboValues(multipliers={9: 2, 18: 2}).detect_preset() == "standard"
    assert TurboValues(multipliers={9: 2}).detect_preset() == "custom"
    assert TurboValues().detect_preset() == "custom"

    with pytest.raises(ValueError):
        TurboValues.from_preset("nope")


# ================================================================
# ScoringConfig
# ================================================================

def test_scoring_config_defaults():
    config = ScoringConfig()
    assert config.points_for(ScoreType.HOLE_IN_ONE) == 10
    assert config.points_for(ScoreType.ALBATROSS) == 10
    assert config.points_for(ScoreType.EAGLE) == 5
    assert config.points_for(ScoreType.BIRDIE) == 2
    assert config.points_for(ScoreType.PAR_OR_WORSE) == 1


def test_scoring_config_aliases_and_albatross():
    config = ScoringConfig(holeInOne=20, parOrWorse=0, albatross=8)
    assert config.hole_in_one == 20
    assert config.points_for(ScoreType.PAR_OR_WORSE) == 0
    assert config.points_for(ScoreType.ALBATROSS) == 8

    assert ScoringConfig(hole_in_one=15).hole_in_one == 15

    with pytest.raises(ValidationError):
        ScoringConfig(eagle=-1)


# ================================================================
# Handicap overrides
# ================================================================

def test_segment_for_hole():
    assert segment_for_hole(1) == Segment.FRONT_NINE
    assert segment_for_hole(9) == Segment.FRONT_NINE
    assert segment_for_hole(10) == Segment.BACK_NINE


def test_overrides_resolve_from_either_direction():
    overrides = HandicapOverrides(entries=[
        HandicapOverride(from_player_id="a", to_player_id="b", segment="front9", strokes=3),
        HandicapOverride(from_player_id="a", to_player_id="b", segment="back9", strokes=-2),
    ])
    assert overrides.get_strokes("a", "b", Segment.FRONT_NINE) == 3
    assert overrides.get_strokes("b", "a", Segment.FRONT_NINE) == -3
    assert overrides.strokes_owed("a", "b", Segment.FRONT_NINE) == 3
    assert overrides.strokes_owed("b", "a", Segment.FRONT_NINE) == 0
    assert overrides.strokes_owed("a", "b", Segment.BACK_NINE) == 0
    assert overrides.strokes_owed("b", "a", Segment.BACK_NINE) == 2
    assert overrides.strokes_owed("a", "c", Segment.FRONT_NINE) == 0


def test_overrides_reject_non_reciprocal_pairs():
    with pytest.raises(ValidationError):
        HandicapOverrides(entries=[
            HandicapOverride(from_player_id="a", to_player_id="b", segment="front9", strokes=3),
            HandicapOverride(from_player_id="b", to_player_id="a", segment="front9", strokes=3),
        ])

    # Exact negation is accepted
    HandicapOverrides(entries=[
        HandicapOverride(from_player_id="a", to_player_id="b", segment="front9", strokes=3),
        HandicapOverride(from_player_id="b", to_player_id="a", segment="front9", strokes=-3),
    ])


def test_overrides_reject_duplicates_and_self_pairs():
    entry = HandicapOverride(from_player_id="a", to_player_id="b", segment="front9", strokes=1)
    with pytest.raises(ValidationError):
        HandicapOverrides(entries=[entry, entry])

    with pytest.raises(ValidationError):
        HandicapOverrides(entries=[
            HandicapOverride(from_player_id="a", to_player_id="a", segment="front9", strokes=1),
        ])


def test_override_range_is_clamped_at_boundary():
    with pytest.raises(ValidationError):
        HandicapOverride(from_player_id="a", to_player_id="b", segment="front9", strokes=11)
    with pytest.raises(ValidationError):
        HandicapOverride(from_player_id="a", to_player_id="b", segment="front9", strokes=-11)


def test_set_strokes_writes_both_directions():
    overrides = HandicapOverrides()
    assert overrides.set_strokes("a", "b", Segment.BACK_NINE, 4) is None
    assert overrides.get_strokes("b", "a", Segment.BACK_NINE) == -4
    assert len(overrides.entries) == 2

    # Setting from the other side replaces the pair
    assert overrides.set_strokes("b", "a", Segment.BACK_NINE, 1) is None
    assert overrides.get_strokes("a", "b", Segment.BACK_NINE) == -1
    assert len(overrides.entries) == 2
    assert sorted(overrides.player_ids()) == ["a", "b"]

    assert overrides.set_strokes("a", "b", Segment.FRONT_NINE, 12) is not None
    assert overrides.get_strokes("a", "b", Segment.FRONT_NINE) == 0


# ================================================================
# AnimalScore / GameSnapshot
# ================================================================

def test_animal_score_validation():
    score = AnimalScore(player_id="p1", hole_number=3, animal_type="monitor_lizard", count=1)
    assert score.animal_type == AnimalType.MONITOR_LIZARD

    with pytest.raises(ValidationError):
        AnimalScore(player_id="p1", hole_number=3, animal_type="tiger", count=1)

    with pytest.raises(ValidationError):
        AnimalScore(player_id="p1", hole_number=3, animal_type="frog", count=-1)


def test_snapshot_gross_scores_latest_wins():
    course = Course(holes=[Hole(number=1, par=4, handicap=1)])
    snapshot = GameSnapshot(
        course=course,
        players=[Player(id="p1"), Player(id="p2")],
        scores=[
            HoleScore(player_id="p1", hole_number=1, strokes=6),
            HoleScore(player_id="p2", hole_number=1, strokes=4),
            HoleScore(player_id="p1", hole_number=1, strokes=5),
        ],
    )
    assert snapshot.gross_scores("p1") == {1: 5}
    assert snapshot.gross_scores("p2") == {1: 4}
    assert snapshot.gross_scores("missing") == {}
    assert snapshot.get_player("p2").id == "p2"
    assert snapshot.get_player("p3") is None
    assert snapshot.scoring_config == ScoringConfig()


def test_snapshot_rejects_duplicate_players():
    with pytest.raises(ValidationError):
        GameSnapshot(course=Course(), players=[Player(id="p1"), Player(id="p1")])
