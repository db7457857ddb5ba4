"""Scratch org creation defaults schema."""

from pydantic import BaseModel, Field, field_validator

MIN_DURATION_DAYS = 1
MAX_DURATION_DAYS = 30


class ScratchOrgConfig(BaseModel):
    """Defaults applied when a create request leaves an option unset."""

    default_wait_minutes: int = Field(6, description="Minutes to wait for provisioning")
    default_duration_days: int = Field(7, description="Lifetime of a new scratch org in days")
    default_retry: int = Field(0, description="Authorization retry count")

    @field_validator("default_wait_minutes")
    @classmethod
    def validate_wait(cls, v: int) -> int:
        """Validate wait minutes."""
        if v < 2:
            raise ValueError("Wait must be at least 2 minutes")
        return v

    @field_validator("default_duration_days")
    @classmethod
    def validate_duration(cls, v: int) -> int:
        """Validate duration days."""
        if not MIN_DURATION_DAYS <= v <= MAX_DURATION_DAYS:
            raise ValueError(
                f"Duration must be between {MIN_DURATION_DAYS} and {MAX_DURATION_DAYS} days"
            )
        return v

    @field_validator("default_retry")
    @classmethod
    def validate_retry(cls, v: int) -> int:
        """Validate retry count."""
        if v < 0:
            raise ValueError("Retry count must not be negative")
        return v
