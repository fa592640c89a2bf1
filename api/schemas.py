"""API request bodies. Responses reuse the scoring result models."""

from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional

from models import AnimalScore, AnimalType, Course, GameSnapshot, HandicapOverrides, Player, TurboValues


class AllocationRequest(BaseModel):
    players: List[Player]
    course: Course
    turbo: TurboValues = Field(default_factory=TurboValues)
    overrides: Optional[HandicapOverrides] = None


class FocusRequest(BaseModel):
    """A game snapshot viewed by one player."""
    snapshot: GameSnapshot
    player_id: str


class AnimalRequest(BaseModel):
    players: List[Player]
    turbo: TurboValues = Field(default_factory=TurboValues)
    animal_scores: List[AnimalScore] = Field(default_factory=list)


class ScoreUpdate(BaseModel):
    player_id: str
    hole_number: int = Field(..., ge=1, le=18)
    strokes: Optional[int] = Field(None, ge=1, le=20)


class TurboUpdate(BaseModel):
    """Either a named preset or explicit per-hole multipliers."""
    preset: Optional[str] = None
    multipliers: Dict[int, int] = Field(default_factory=dict)


class AnimalUpdate(BaseModel):
    hole_number: int = Field(..., ge=1, le=18)
    animals: Dict[str, Dict[AnimalType, int]]

    @field_validator('animals')
    @classmethod
    def validate_counts(cls, v):
        for player_id, by_animal in v.items():
            for animal, count in by_animal.items():
                if count < 0:
                    raise ValueError(f"Count for {animal.value} cannot be negative (player {player_id})")
        return v


class HandicapUpdate(BaseModel):
    overrides: HandicapOverrides
