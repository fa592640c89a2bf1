from .animal import AnimalScore, AnimalType
from .base import BaseGolfModel
from .course import Course
from .game import GameSnapshot
from .handicap import HandicapOverride, HandicapOverrides, Segment, segment_for_hole
from .hole import Hole
from .hole_score import HoleScore
from .player import Player, PlayerRole
from .scoring_config import ScoreType, ScoringConfig
from .turbo import TURBO_PRESETS, TurboValues

__all__ = [
    "AnimalScore",
    "AnimalType",
    "BaseGolfModel",
    "Course",
    "GameSnapshot",
    "HandicapOverride",
    "HandicapOverrides",
    "Hole",
    "HoleScore",
    "Player",
    "PlayerRole",
    "ScoreType",
    "ScoringConfig",
    "Segment",
    "TURBO_PRESETS",
    "TurboValues",
    "segment_for_hole",
]
