from pydantic import BaseModel, ConfigDict, ValidationError
from typing import Any, Optional


class BaseGolfModel(BaseModel):
    """Shared configuration and correction helper for game data."""
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    def update_field(self, field_name: str, value: Any) -> Optional[str]:
        """Update a field from a host edit. Returns error message if validation fails."""
        try:
            setattr(self, field_name, value)
            return None
        except ValidationError as e:
            return e.errors()[0]['msg']
