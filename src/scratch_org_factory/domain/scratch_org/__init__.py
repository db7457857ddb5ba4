"""Scratch org bounded context."""

from .definition import (
    SNAPSHOT_UNSUPPORTED_OPTIONS,
    find_upper_case_keys,
    validate_definition,
    validate_option,
)
from .exceptions import (
    DefinitionFileNotFoundError,
    DefinitionParseError,
    InvalidJsonCasingError,
    ProjectNotFoundError,
    ScratchOrgInfoRequestError,
    SourceStatusResetFailureError,
    UnrecognizedScratchOrgOptionError,
    UnsupportedSnapshotOptionsError,
)
from .feature_deprecation import ScratchOrgFeatureDeprecation
from .settings_generator import SettingsGenerator
from .value_objects import (
    ScratchOrgInfoRecord,
    ScratchOrgInfoRequestResult,
    ScratchOrgInfoResult,
    ScratchOrgInfoStatus,
)

__all__ = [
    "SNAPSHOT_UNSUPPORTED_OPTIONS",
    "find_upper_case_keys",
    "validate_definition",
    "validate_option",
    "DefinitionFileNotFoundError",
    "DefinitionParseError",
    "InvalidJsonCasingError",
    "ProjectNotFoundError",
    "ScratchOrgInfoRequestError",
    "SourceStatusResetFailureError",
    "UnrecognizedScratchOrgOptionError",
    "UnsupportedSnapshotOptionsError",
    "ScratchOrgFeatureDeprecation",
    "SettingsGenerator",
    "ScratchOrgInfoRecord",
    "ScratchOrgInfoRequestResult",
    "ScratchOrgInfoResult",
    "ScratchOrgInfoStatus",
]
