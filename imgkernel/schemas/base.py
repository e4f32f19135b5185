"""
Base schema for processing parameters.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseProcessingParams(BaseModel):
    """
    Common base for all processing parameter models.

    Unknown fields are rejected so that a misspelled option fails loudly
    instead of silently falling back to a default.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with enums as their string values."""
        return self.model_dump(mode="json", exclude_none=True)
