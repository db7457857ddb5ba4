"""Scratch org domain exceptions."""

from typing import Any, List, Optional

from scratch_org_factory.domain.base.exceptions import DomainException, ValidationError
from scratch_org_factory.domain.scratch_org.messages import get_message


class ScratchOrgException(DomainException):
    """Base exception for scratch org domain errors."""


class ScratchOrgDefinitionError(ValidationError):
    """Base exception for invalid scratch org definitions."""


class UnrecognizedScratchOrgOptionError(ScratchOrgDefinitionError):
    """Raised when a denylisted option is supplied in the definition."""

    def __init__(self, option: str):
        super().__init__(
            get_message("unrecognizedScratchOrgOption", option),
            "UNRECOGNIZED_SCRATCH_ORG_OPTION",
            {"option": option},
        )
        self.option = option


class UnsupportedSnapshotOptionsError(ScratchOrgDefinitionError):
    """Raised when options incompatible with snapshot creation are combined with it."""

    def __init__(self, options: List[str]):
        super().__init__(
            get_message("unsupportedSnapshotOrgCreateOptions", ", ".join(options)),
            "ORG_SNAPSHOT",
            {"options": list(options)},
        )
        self.options = list(options)


class InvalidJsonCasingError(ScratchOrgDefinitionError):
    """Raised when a definition key does not start with a lower-case letter."""

    def __init__(self, key: str):
        super().__init__(
            get_message("invalidJsonCasing", key),
            "INVALID_JSON_CASING",
            {"key": key},
        )
        self.key = key


class DefinitionParseError(ScratchOrgDefinitionError):
    """Raised when a definition file or inline definition is not valid JSON."""

    def __init__(self, source: str, reason: Optional[str] = None):
        super().__init__(
            get_message("definitionParseError", source),
            "DEFINITION_PARSE_ERROR",
            {"source": source, "reason": reason},
        )
        self.source = source


class DefinitionFileNotFoundError(ScratchOrgDefinitionError):
    """Raised when the definition file cannot be read."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            get_message("definitionFileNotFound", path, reason),
            "DEFINITION_FILE_NOT_FOUND",
            {"path": path},
        )
        self.path = path


class ScratchOrgInfoRequestError(ScratchOrgException):
    """Raised when the hub org does not accept the org-info creation request."""

    def __init__(self, hub_username: Any, errors: List[Any]):
        super().__init__(
            get_message("scratchOrgInfoRequestFailed", hub_username, "; ".join(map(str, errors)) or "unknown error"),
            "SCRATCH_ORG_INFO_REQUEST_FAILED",
            {"hub_username": hub_username, "errors": list(errors)},
        )


class SourceStatusResetFailureError(ScratchOrgException):
    """Raised when source member revision counters cannot be reset on the new org."""

    def __init__(self, org_id: Optional[str], username: Optional[str]):
        super().__init__(
            get_message("sourceStatusResetFailure", org_id, username),
            "SOURCE_STATUS_RESET_FAILURE",
            {"org_id": org_id, "username": username},
        )
        self.org_id = org_id
        self.username = username


class ProjectNotFoundError(ScratchOrgException):
    """Raised when no project file exists at or above a directory."""

    def __init__(self, path: str):
        super().__init__(
            get_message("projectNotFound", path),
            "INVALID_PROJECT_WORKSPACE",
            {"path": path},
        )
        self.path = path


class ProjectParseError(ScratchOrgException):
    """Raised when the project file is not valid JSON."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            get_message("projectParseError", path, reason),
            "PROJECT_PARSE_ERROR",
            {"path": path},
        )
        self.path = path


class DuplicateSettingsError(ScratchOrgDefinitionError):
    """Raised when a definition mixes ``settings`` with legacy ``orgPreferences``."""

    def __init__(self):
        super().__init__(get_message("duplicateSettingsSpecified"), "SIGNUP_DUPLICATE_SETTINGS_SPECIFIED")


class DeprecatedPrefFormatError(ScratchOrgDefinitionError):
    """Raised when a definition still uses legacy ``orgPreferences``."""

    def __init__(self):
        super().__init__(get_message("deprecatedPrefFormat"), "DEPRECATED_PREF_FORMAT")
