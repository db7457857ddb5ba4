"""Resolution of the scratch org definition from its configuration sources."""
from typing import Any, Dict, Optional

from scratch_org_factory.application.scratch_org.options import ScratchOrgCreateOptions
from scratch_org_factory.domain.scratch_org.definition import validate_definition
from scratch_org_factory.domain.scratch_org.exceptions import (
    DefinitionFileNotFoundError,
    DefinitionParseError,
)
from scratch_org_factory.domain.scratch_org.feature_deprecation import ScratchOrgFeatureDeprecation
from scratch_org_factory.domain.scratch_org.info_generator import generate_scratch_org_info
from scratch_org_factory.domain.scratch_org.ports import ProjectResolverPort
from scratch_org_factory.domain.scratch_org.value_objects import ScratchOrgInfoResult
from scratch_org_factory.infrastructure.logging.logger import get_logger
from scratch_org_factory.infrastructure.utilities.json_utils import parse_json_object

logger = get_logger(__name__)

INLINE_DEFINITION_SOURCE = "definitionjson"


class ConfigurationResolver:
    """
    Merges the definition file, inline JSON and structured overrides into a
    single validated org-info payload.

    Precedence, lowest to highest: definition file, inline JSON, structured
    overrides, then the computed consumer key and duration. Validation runs
    on the merged user input before anything is computed or sent anywhere.
    """

    def __init__(
        self,
        project_resolver: Optional[ProjectResolverPort] = None,
        feature_deprecation: Optional[ScratchOrgFeatureDeprecation] = None,
    ):
        self._project_resolver = project_resolver
        self._feature_deprecation = feature_deprecation or ScratchOrgFeatureDeprecation()

    async def resolve(self, options: ScratchOrgCreateOptions) -> ScratchOrgInfoResult:
        """
        Build the org-info payload and its deprecation warnings.

        Local sources (inline JSON, the definition file) are read
        synchronously; only the project lookup is awaited.

        Args:
            options: Creation options

        Returns:
            ScratchOrgInfoResult with the generated payload and warnings

        Raises:
            DefinitionParseError: If the inline JSON or definition file is malformed
            DefinitionFileNotFoundError: If the definition file cannot be read
            InvalidJsonCasingError: If any key is not lower camel case
            UnrecognizedScratchOrgOptionError: If a denylisted option is present
            UnsupportedSnapshotOptionsError: If snapshot is combined with incompatible options
        """
        payload = self._merge_sources(options)

        validate_definition(payload)

        if options.connected_app_consumer_key:
            payload["connectedAppConsumerKey"] = options.connected_app_consumer_key

        payload["durationDays"] = options.duration_days

        ignore_ancestor_ids = options.nonamespace or options.noancestors or False

        warnings = self._feature_deprecation.get_feature_warnings(payload.get("features"))
        for warning in warnings:
            logger.debug("Deprecated feature requested", warning=warning)

        scratch_org_info = await generate_scratch_org_info(
            hub_org=options.hub_org,
            scratch_org_info_payload=payload,
            nonamespace=options.nonamespace,
            ignore_ancestor_ids=ignore_ancestor_ids,
            project_resolver=self._project_resolver,
        )

        return ScratchOrgInfoResult(scratch_org_info=scratch_org_info, warnings=warnings)

    def _merge_sources(self, options: ScratchOrgCreateOptions) -> Dict[str, Any]:
        definition_json: Dict[str, Any] = {}
        if options.definitionjson:
            try:
                definition_json = parse_json_object(options.definitionjson)
            except ValueError as e:
                raise DefinitionParseError(INLINE_DEFINITION_SOURCE, str(e)) from e

        # Structured overrides win over inline JSON
        org_config_input = {**definition_json, **(options.org_config or {})}

        if not options.definitionfile:
            return org_config_input

        file_contents = self._read_definition_file(options.definitionfile)
        # Inline JSON and overrides win over the file
        return {**file_contents, **org_config_input}

    @staticmethod
    def _read_definition_file(path: str) -> Dict[str, Any]:
        """Read and parse the definition file synchronously."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                file_data = f.read()
        except OSError as e:
            raise DefinitionFileNotFoundError(path, e.strerror or str(e)) from e

        try:
            return parse_json_object(file_data)
        except ValueError as e:
            raise DefinitionParseError(path, str(e)) from e
