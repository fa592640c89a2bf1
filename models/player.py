from enum import Enum
from pydantic import Field, field_validator
from typing import Optional

from .base import BaseGolfModel


class PlayerRole(str, Enum):
    HOST = "host"
    PLAYER = "player"


class Player(BaseGolfModel):
    """A participant in a game. Hosts may edit turbo, scoring and handicaps."""
    id: str
    name: Optional[str] = None
    role: PlayerRole = PlayerRole.PLAYER
    handicap: int = Field(0, ge=0, le=54)

    @field_validator('handicap', mode='before')
    @classmethod
    def default_missing_handicap(cls, v):
        # Players created without a handicap play off scratch
        return 0 if v is None else v

    @property
    def is_host(self) -> bool:
        return self.role == PlayerRole.HOST
