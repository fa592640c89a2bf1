from pydantic import Field, field_validator
from typing import Dict

from .base import BaseGolfModel

# Named multiplier layouts offered to the host. Holes not listed play at x1.
TURBO_PRESETS: Dict[str, Dict[int, int]] = {
    "standard": {9: 2, 18: 2},
    "curve": {7: 2, 8: 3, 9: 4, 16: 2, 17: 3, 18: 4},
    "multiplier": {1: 2, 7: 2, 8: 2, 9: 3, 10: 2, 16: 2, 17: 2, 18: 3},
}

CUSTOM_PRESET = "custom"


class TurboValues(BaseGolfModel):
    """Per-hole point multipliers. A hole with a multiplier above 1 never receives handicap strokes."""
    multipliers: Dict[int, int] = Field(default_factory=dict)

    @field_validator('multipliers')
    @classmethod
    def validate_multipliers(cls, v):
        for hole_num, multiplier in v.items():
            if not 1 <= hole_num <= 18:
                raise ValueError(f"Hole number {hole_num} must be 1-18")
            if multiplier < 1:
                raise ValueError(f"Turbo multiplier for hole {hole_num} must be at least 1")
        return v

    @classmethod
    def from_preset(cls, name: str) -> "TurboValues":
        """Build a full 18-hole turbo table from a named preset."""
        if name not in TURBO_PRESETS:
            raise ValueError(f"Unknown turbo preset: {name}")
        values = {hole: 1 for hole in range(1, 19)}
        values.update(TURBO_PRESETS[name])
        return cls(multipliers=values)

    def get(self, hole_number: int) -> int:
        """Multiplier for a hole, defaulting to 1."""
        return self.multipliers.get(hole_number) or 1

    def is_turbo(self, hole_number: int) -> bool:
        return self.get(hole_number) > 1

    def set_multiplier(self, hole_number: int, multiplier: int):
        new_values = {**self.multipliers, hole_number: multiplier}
        return self.update_field('multipliers', new_values)

    def detect_preset(self) -> str:
        """Name of the preset these values match, or ``"custom"``."""
        for name, preset in TURBO_PRESETS.items():
            if all(self.get(hole) == preset.get(hole, 1) for hole in range(1, 19)):
                return name
        return CUSTOM_PRESET
