from pydantic import Field, field_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole


class Course(BaseGolfModel):
    """Course data loaded for a game. Read-only to the scoring engine."""
    id: Optional[str] = None
    name: Optional[str] = None
    holes: List[Hole] = Field(default_factory=list)

    @field_validator('holes')
    @classmethod
    def validate_unique_hole_numbers(cls, v):
        numbers = [h.number for h in v]
        if len(numbers) != len(set(numbers)):
            raise ValueError("Hole numbers must be unique within a course")
        return sorted(v, key=lambda h: h.number)

    def get_hole(self, number: int) -> Optional[Hole]:
        """Get a hole by its number (1-18)."""
        for hole in self.holes:
            if hole.number == number:
                return hole
        return None

    @property
    def front_nine(self) -> List[Hole]:
        return [h for h in self.holes if 1 <= h.number <= 9]

    @property
    def back_nine(self) -> List[Hole]:
        return [h for h in self.holes if 10 <= h.number <= 18]

    @property
    def front_nine_par(self) -> Optional[int]:
        """Par for holes 1-9."""
        front = self.front_nine
        return sum(h.par for h in front) if front else None

    @property
    def back_nine_par(self) -> Optional[int]:
        """Par for holes 10-18."""
        back = self.back_nine
        return sum(h.par for h in back) if back else None

    @property
    def par(self) -> Optional[int]:
        return sum(h.par for h in self.holes) if self.holes else None
