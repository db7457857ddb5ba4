"""Scratch org value objects."""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScratchOrgInfoStatus(str, Enum):
    """Lifecycle states of an org-info record on the hub."""

    NEW = "New"
    ACTIVE = "Active"
    ERROR = "Error"
    DELETED = "Deleted"


class ScratchOrgInfoRequestResult(BaseModel):
    """Result of submitting an org-info record to the hub."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    success: bool = False
    errors: List[Any] = Field(default_factory=list)


class ScratchOrgInfoRecord(BaseModel):
    """
    A completed org-info record as returned by the hub.

    Field aliases follow the platform's PascalCase record fields so a raw
    record dictionary can be validated directly.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    id: str = Field(alias="Id")
    status: ScratchOrgInfoStatus = Field(alias="Status")
    signup_username: Optional[str] = Field(None, alias="SignupUsername")
    login_url: Optional[str] = Field(None, alias="LoginUrl")
    signup_instance: Optional[str] = Field(None, alias="SignupInstance")
    scratch_org: Optional[str] = Field(None, alias="ScratchOrg")
    auth_code: Optional[str] = Field(None, alias="AuthCode")
    error_code: Optional[str] = Field(None, alias="ErrorCode")


class ScratchOrgInfoResult(BaseModel):
    """Validated org-info payload together with the warnings raised while building it."""

    scratch_org_info: Dict[str, Any]
    warnings: List[str] = Field(default_factory=list)

