"""Base DTO class with a stable snake_case API."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all DTOs.

    Provides stable to_dict()/from_dict() methods so callers do not depend on
    pydantic directly.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return a snake_case dictionary of the DTO."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseDTO":
        """Create an instance from a snake_case dictionary."""
        return cls.model_validate(data)
