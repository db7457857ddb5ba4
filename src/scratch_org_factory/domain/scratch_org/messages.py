"""Message catalog for scratch org creation.

Every user-facing error and warning string is looked up here by key so the
wording lives in one place. Tokens are positional and substituted in order
for each ``%s`` placeholder.
"""

from typing import Any, Dict

MESSAGES: Dict[str, str] = {
    "unrecognizedScratchOrgOption": (
        "The %s option isn't supported in the scratch org definition. "
        "Use the dedicated duration option instead."
    ),
    "unsupportedSnapshotOrgCreateOptions": (
        "Org snapshots don't support one or more options you specified: %s"
    ),
    "invalidJsonCasing": (
        "All scratch org definition keys must be lower camel case. Found: %s"
    ),
    "definitionParseError": "An error occurred parsing %s",
    "definitionFileNotFound": "Unable to read the scratch org definition file %s: %s",
    "scratchOrgInfoRequestFailed": (
        "The hub org %s rejected the scratch org request: %s"
    ),
    "sourceStatusResetFailure": (
        "Successfully created org with ID: %s and name: %s. Unfortunately, source "
        "tracking isn't working as expected. If you check source status, the "
        "results may be incorrect. Try again by creating another scratch org."
    ),
    "projectNotFound": (
        "This directory does not contain a valid project. "
        "No sfdx-project.json found at or above %s"
    ),
    "projectParseError": "Unable to parse project file %s: %s",
    "deprecatedFeature": (
        "The feature %s will be deprecated in a future release. It's been replaced by %s."
    ),
    "removedFeature": (
        "The feature %s has been deprecated. It has been removed from the list of "
        "requested features."
    ),
    "duplicateSettingsSpecified": (
        "You cannot use 'settings' and 'orgPreferences' in your scratch definition file, "
        "please specify one or the other."
    ),
    "deprecatedPrefFormat": (
        "We've deprecated OrgPreferences. Update the scratch org definition file to "
        "replace OrgPreferences with their corresponding settings."
    ),
}


def get_message(key: str, *tokens: Any) -> str:
    """
    Look up a catalog message and substitute its tokens.

    Args:
        key: Catalog key
        *tokens: Values for the ``%s`` placeholders, in order

    Returns:
        Formatted message

    Raises:
        KeyError: If the key is not in the catalog
    """
    template = MESSAGES[key]
    if not tokens:
        return template
    return template % tuple(str(token) for token in tokens)
