from enum import Enum
from pydantic import Field
from typing import Optional

from .base import BaseGolfModel

# Used for the albatross tier when the host has not configured one.
DEFAULT_ALBATROSS_POINTS = 10


class ScoreType(str, Enum):
    """Classification of the gross score that decided a head-to-head hole."""
    HOLE_IN_ONE = "HIO"
    ALBATROSS = "Albatross"
    EAGLE = "Eagle"
    BIRDIE = "Birdie"
    PAR_OR_WORSE = "ParOrWorse"


class ScoringConfig(BaseGolfModel):
    """Point table for head-to-head wins. Accepts camelCase keys from clients."""
    hole_in_one: int = Field(10, ge=0, alias="holeInOne")
    albatross: Optional[int] = Field(None, ge=0)
    eagle: int = Field(5, ge=0)
    birdie: int = Field(2, ge=0)
    par_or_worse: int = Field(1, ge=0, alias="parOrWorse")

    def points_for(self, score_type: ScoreType) -> int:
        """Base point value for a score classification."""
        if score_type == ScoreType.HOLE_IN_ONE:
            return self.hole_in_one
        if score_type == ScoreType.ALBATROSS:
            return self.albatross if self.albatross is not None else DEFAULT_ALBATROSS_POINTS
        if score_type == ScoreType.EAGLE:
            return self.eagle
        if score_type == ScoreType.BIRDIE:
            return self.birdie
        return self.par_or_worse
