"""Builds the org-info payload sent to the hub."""

from typing import Any, Dict, List, Optional

from scratch_org_factory.domain.scratch_org.exceptions import (
    DeprecatedPrefFormatError,
    DuplicateSettingsError,
    ProjectNotFoundError,
    ProjectParseError,
)
from scratch_org_factory.domain.scratch_org.feature_deprecation import ScratchOrgFeatureDeprecation
from scratch_org_factory.domain.scratch_org.ports import HubOrgPort, ProjectResolverPort
from scratch_org_factory.domain.scratch_org.settings_generator import SETTINGS_KEYS, SettingsGenerator
from scratch_org_factory.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ORG_NAME = "Company"
DEFAULT_CLIENT_ID = "PlatformCLI"
DEFAULT_OAUTH_PORT = 1717
PACKAGE_VERSION_ID_PREFIX = "04t"


def get_ancestor_ids(project_config: Dict[str, Any]) -> str:
    """Collect package version ancestor ids declared in the project's package directories."""
    ancestor_ids: List[str] = []
    for package_dir in project_config.get("packageDirectories") or []:
        ancestor_id = package_dir.get("ancestorId")
        if ancestor_id and str(ancestor_id).startswith(PACKAGE_VERSION_ID_PREFIX) and ancestor_id not in ancestor_ids:
            ancestor_ids.append(ancestor_id)
    return ";".join(ancestor_ids)


async def generate_scratch_org_info(
    *,
    hub_org: HubOrgPort,
    scratch_org_info_payload: Dict[str, Any],
    nonamespace: bool = False,
    ignore_ancestor_ids: bool = False,
    project_resolver: Optional[ProjectResolverPort] = None,
) -> Dict[str, Any]:
    """
    Fill in the org-info fields derived from the hub and the local project.

    The payload is updated in place and returned. A project is optional: when
    none can be resolved, namespace and ancestor ids are left unset.

    Args:
        hub_org: Hub org the request is submitted to
        scratch_org_info_payload: Validated definition payload
        nonamespace: Do not apply the project namespace
        ignore_ancestor_ids: Do not resolve package ancestor ids
        project_resolver: Locates the local project

    Returns:
        The completed payload
    """
    project_config: Dict[str, Any] = {}
    if project_resolver is not None:
        try:
            project = await project_resolver.resolve()
            project_config = await project.resolve_project_config()
        except (ProjectNotFoundError, ProjectParseError) as e:
            logger.debug("No usable project, org info generated without project data", reason=e.message)

    scratch_org_info_payload["orgName"] = scratch_org_info_payload.get("orgName") or DEFAULT_ORG_NAME
    scratch_org_info_payload["package2AncestorIds"] = (
        "" if ignore_ancestor_ids else get_ancestor_ids(project_config)
    )

    if not scratch_org_info_payload.get("connectedAppConsumerKey"):
        scratch_org_info_payload["connectedAppConsumerKey"] = hub_org.get_client_id() or DEFAULT_CLIENT_ID

    namespace = project_config.get("namespace")
    if not nonamespace and namespace:
        scratch_org_info_payload["namespace"] = namespace

    scratch_org_info_payload["connectedAppCallbackUrl"] = f"http://localhost:{DEFAULT_OAUTH_PORT}/OauthRedirect"
    return scratch_org_info_payload


def build_scratch_org_request(
    scratch_org_info: Dict[str, Any],
    settings: SettingsGenerator,
    feature_deprecation: Optional[ScratchOrgFeatureDeprecation] = None,
) -> Dict[str, Any]:
    """
    Convert an org-info payload into the record body the hub accepts.

    Settings sections are removed, deprecated features filtered, and keys
    converted to the record's PascalCase field names.

    Raises:
        DuplicateSettingsError: If both settings and orgPreferences are given
        DeprecatedPrefFormatError: If orgPreferences are given
    """
    request = {key: value for key, value in scratch_org_info.items() if key not in SETTINGS_KEYS}

    if request.get("orgPreferences") and settings.has_settings():
        raise DuplicateSettingsError()
    if request.get("orgPreferences"):
        raise DeprecatedPrefFormatError()

    if "features" in request:
        deprecation = feature_deprecation or ScratchOrgFeatureDeprecation()
        request["features"] = ";".join(deprecation.filter_deprecated_features(request["features"]))

    return {key[:1].upper() + key[1:]: value for key, value in request.items()}
