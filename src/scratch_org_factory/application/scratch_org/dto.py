"""Scratch org creation DTOs."""
from typing import Any, List, Optional

from pydantic import Field

from scratch_org_factory.application.dto import BaseDTO


class ScratchOrgCreateResponse(BaseDTO):
    """Outcome of a successful scratch org creation."""

    scratch_org_info_id: str
    username: Optional[str] = None
    org_id: Optional[str] = None
    login_url: Optional[str] = None
    api_version: Optional[str] = None
    auth_info: Any = None
    warnings: List[str] = Field(default_factory=list)
