from pydantic import Field

from .base import BaseGolfModel


class Hole(BaseGolfModel):
    """A single hole on the course.

    ``handicap`` is the hole's stroke index (HC): 1 is the hardest hole and
    receives allocated strokes first.
    """
    number: int = Field(..., ge=1, le=18)
    par: int = Field(..., ge=3, le=6)
    handicap: int = Field(..., ge=1, le=18)

    @property
    def is_front_nine(self) -> bool:
        return self.number <= 9
