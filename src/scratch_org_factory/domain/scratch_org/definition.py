"""Validation rules for scratch org definition payloads."""

from typing import Any, Dict, Iterable, Optional

from scratch_org_factory.domain.scratch_org.exceptions import (
    InvalidJsonCasingError,
    UnrecognizedScratchOrgOptionError,
    UnsupportedSnapshotOptionsError,
)

# Options that may only be supplied through a dedicated create option.
DENYLISTED_OPTIONS = ("durationDays",)

SNAPSHOT_KEY = "snapshot"

# Options that conflict with creating an org from a snapshot.
SNAPSHOT_UNSUPPORTED_OPTIONS = (
    "features",
    "orgPreferences",
    "edition",
    "sourceOrg",
    "settingsPath",
    "releaseVersion",
    "language",
)


def find_upper_case_keys(
    data: Optional[Dict[str, Any]], section_blocklist: Iterable[str] = ()
) -> Optional[str]:
    """
    Find the first key that does not start with a lower-case character.

    Nested mappings are searched depth first, except for sections named in
    section_blocklist. A key is considered upper case when its first character
    is unchanged by upper-casing, so keys starting with digits or punctuation
    are reported too.

    Args:
        data: Mapping to search
        section_blocklist: Keys whose nested mappings are not searched

    Returns:
        The offending key, or None when every key is lower camel case
    """
    if not data:
        return None
    blocklist = set(section_blocklist)
    for key, value in data.items():
        first = str(key)[:1]
        if first == first.upper():
            return key
        if isinstance(value, dict) and key not in blocklist:
            found = find_upper_case_keys(value, blocklist)
            if found:
                return found
    return None


def validate_option(key: str, payload: Dict[str, Any]) -> None:
    """
    Check a single definition key against the option rules.

    Raises:
        UnrecognizedScratchOrgOptionError: If the key is denylisted (case-insensitive)
        UnsupportedSnapshotOptionsError: If the key is ``snapshot`` and any
            snapshot-incompatible option is present in the payload
    """
    lowered = key.lower()
    for denied in DENYLISTED_OPTIONS:
        if lowered == denied.lower():
            raise UnrecognizedScratchOrgOptionError(denied)

    if lowered == SNAPSHOT_KEY:
        found = [option for option in SNAPSHOT_UNSUPPORTED_OPTIONS if option in payload]
        if found:
            raise UnsupportedSnapshotOptionsError(found)


def validate_definition(payload: Dict[str, Any]) -> None:
    """Run the casing check, then the option rules on every top-level key."""
    upper_case_key = find_upper_case_keys(payload)
    if upper_case_key:
        raise InvalidJsonCasingError(upper_case_key)

    for key in payload:
        validate_option(key, payload)
