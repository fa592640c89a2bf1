from enum import Enum
from pydantic import Field

from .base import BaseGolfModel


class AnimalType(str, Enum):
    MONKEY = "monkey"
    GIRAFFE = "giraffe"
    SNAKE = "snake"
    CAMEL = "camel"
    FROG = "frog"
    MONITOR_LIZARD = "monitor_lizard"


class AnimalScore(BaseGolfModel):
    """Count of one animal penalty taken by a player on a hole. Zero is the same as no record."""
    player_id: str
    hole_number: int = Field(..., ge=1, le=18)
    animal_type: AnimalType
    count: int = Field(0, ge=0)
