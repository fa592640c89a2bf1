from pydantic import Field, model_validator
from typing import Dict, List, Optional

from .animal import AnimalScore
from .base import BaseGolfModel
from .course import Course
from .handicap import HandicapOverrides
from .hole_score import HoleScore
from .player import Player
from .scoring_config import ScoringConfig
from .turbo import TurboValues


class GameSnapshot(BaseGolfModel):
    """Consistent view of one game's state, as supplied by the persistence layer.

    Every derived value (stroke allocation, head-to-head points, animal totals)
    is recomputed from a snapshot rather than updated incrementally.
    """
    game_id: Optional[str] = None
    course: Course
    players: List[Player] = Field(default_factory=list)
    turbo: TurboValues = Field(default_factory=TurboValues)
    scores: List[HoleScore] = Field(default_factory=list)
    overrides: Optional[HandicapOverrides] = None
    scoring_config: ScoringConfig = Field(default_factory=ScoringConfig)
    animal_scores: List[AnimalScore] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_unique_players(self):
        ids = [p.id for p in self.players]
        if len(ids) != len(set(ids)):
            raise ValueError("Player ids must be unique within a game")
        return self

    def get_player(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def gross_scores(self, player_id: str) -> Dict[int, Optional[int]]:
        """Map hole number -> gross strokes for a player. Later entries win."""
        result: Dict[int, Optional[int]] = {}
        for score in self.scores:
            if score.player_id == player_id:
                result[score.hole_number] = score.strokes
        return result
