from pydantic import Field
from typing import Optional

from .base import BaseGolfModel


class HoleScore(BaseGolfModel):
    """Gross strokes for one player on one hole. ``strokes=None`` means not played yet."""
    player_id: str
    hole_number: int = Field(..., ge=1, le=18)
    strokes: Optional[int] = Field(None, ge=1, le=20)

    def to_par(self, par: int) -> Optional[int]:
        """Calculate score relative to par (+2, -1, etc.)."""
        if self.strokes is None:
            return None
        return self.strokes - par
