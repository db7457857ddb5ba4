"""Scratch org creation orchestrator."""
from typing import Any, List, Optional

from scratch_org_factory.application.scratch_org.dto import ScratchOrgCreateResponse
from scratch_org_factory.application.scratch_org.options import ScratchOrgCreateOptions
from scratch_org_factory.application.scratch_org.resolver import ConfigurationResolver
from scratch_org_factory.domain.scratch_org.exceptions import (
    ProjectNotFoundError,
    ProjectParseError,
    ScratchOrgInfoRequestError,
    SourceStatusResetFailureError,
)
from scratch_org_factory.domain.scratch_org.ports import (
    OrgConnectorPort,
    ProjectResolverPort,
    ScratchOrgConnectionPort,
    ScratchOrgInfoApiPort,
)
from scratch_org_factory.domain.scratch_org.settings_generator import SettingsGenerator
from scratch_org_factory.domain.scratch_org.value_objects import ScratchOrgInfoRecord
from scratch_org_factory.infrastructure.logging.logger import get_logger

SOURCE_MEMBER = "SourceMember"


class ScratchOrgCreateService:
    """
    Creates a scratch org from resolved options.

    Each step awaits the previous one and any failure aborts the whole
    creation; nothing already created on the hub or the new org is rolled
    back. An instance performs one creation and keeps its results in
    ``auth_info``, ``username`` and ``warnings``.
    """

    def __init__(
        self,
        options: ScratchOrgCreateOptions,
        scratch_org_info_api: ScratchOrgInfoApiPort,
        org_connector: OrgConnectorPort,
        project_resolver: Optional[ProjectResolverPort] = None,
        configuration_resolver: Optional[ConfigurationResolver] = None,
        settings_generator: Optional[SettingsGenerator] = None,
    ):
        self._options = options
        self._api = scratch_org_info_api
        self._org_connector = org_connector
        self._project_resolver = project_resolver
        self._configuration_resolver = configuration_resolver or ConfigurationResolver(project_resolver)
        self._settings_generator = settings_generator or SettingsGenerator()
        self._logger = get_logger(__name__)

        self.auth_info: Any = None
        self.username: Optional[str] = None
        self.warnings: List[str] = []
        self.scratch_org_info_id: Optional[str] = None
        self._scratch_org: Optional[ScratchOrgConnectionPort] = None

    async def create(self) -> ScratchOrgCreateResponse:
        """
        Run the full creation sequence.

        Returns:
            ScratchOrgCreateResponse describing the new org

        Raises:
            ScratchOrgDefinitionError: If the definition is invalid
            ScratchOrgInfoRequestError: If the hub rejects the org-info request
            SourceStatusResetFailureError: If source tracking cannot be reset
        """
        self._logger.debug("scratchOrgCreate: init")
        options = self._options

        resolved = await self._configuration_resolver.resolve(options)
        scratch_org_info = resolved.scratch_org_info
        self.warnings = list(resolved.warnings)

        await self._settings_generator.extract(scratch_org_info)
        self._logger.debug("Definition settings extracted", has_settings=self._settings_generator.has_settings())

        request_result = await self._api.request_scratch_org_creation(
            options.hub_org, scratch_org_info, self._settings_generator
        )
        if not request_result.success or not request_result.id:
            raise ScratchOrgInfoRequestError(options.hub_org.get_username(), request_result.errors)
        self.scratch_org_info_id = request_result.id
        self._logger.debug("Scratch org info created", record_id=self.scratch_org_info_id)

        scratch_org_info_complete = await self._api.poll_for_scratch_org_info(
            options.hub_org, self.scratch_org_info_id, options.wait
        )

        signup_target_login_url_config = await self._resolve_signup_target_login_url()

        scratch_org_auth_info = await self._api.authorize_scratch_org(
            scratch_org_info_complete=scratch_org_info_complete,
            hub_org=options.hub_org,
            client_secret=options.client_secret,
            set_as_default=options.setdefaultusername,
            alias=options.setalias,
            signup_target_login_url_config=signup_target_login_url_config,
            retry=options.retry or 0,
        )

        self._scratch_org = await self._org_connector.connect(scratch_org_auth_info)
        self.username = self._scratch_org.get_username()

        api_version = await self._resolve_api_version()
        self.auth_info = await self._api.deploy_settings_and_resolve_url(
            scratch_org_auth_info, api_version, self._settings_generator
        )
        self._logger.debug("Settings deployed to org", api_version=api_version)

        await self.update_revision_counter_to_zero()

        return self._build_response(scratch_org_info_complete, api_version)

    async def _resolve_signup_target_login_url(self) -> Optional[str]:
        if self._project_resolver is None:
            return None
        try:
            project = await self._project_resolver.resolve()
            project_config = await project.resolve_project_config()
        except (ProjectNotFoundError, ProjectParseError) as e:
            # a project isn't required for org creation
            self._logger.debug("No project login url override", reason=e.message)
            return None
        return project_config.get("signupTargetLoginUrl")

    async def _resolve_api_version(self) -> str:
        if self._options.apiversion is not None:
            return self._options.apiversion
        configured = self._options.config_aggregator.get_property_value("apiVersion")
        if configured is not None:
            return str(configured)
        return await self._scratch_org.retrieve_max_api_version()

    async def update_revision_counter_to_zero(self) -> None:
        """
        Reset RevisionCounter to zero on every source member the new org tracks.

        Some definitions create source members during signup; resetting them
        gives source tracking a clean baseline.

        Raises:
            SourceStatusResetFailureError: If the update call fails
        """
        conn = self._scratch_org
        records = await conn.tooling_find(SOURCE_MEMBER, {"RevisionCounter": {"$gt": 0}}, ["Id"])
        if not records:
            self._logger.debug("No source members to reset")
            return

        try:
            await conn.tooling_update(
                SOURCE_MEMBER, [{"Id": record["Id"], "RevisionCounter": 0} for record in records]
            )
        except Exception as e:
            self._logger.error("Source member revision reset failed", error=str(e))
            raise SourceStatusResetFailureError(conn.get_org_id(), conn.get_username()) from e

        self._logger.debug("Source member revision counters reset", count=len(records))

    def _build_response(
        self, scratch_org_info_complete: ScratchOrgInfoRecord, api_version: str
    ) -> ScratchOrgCreateResponse:
        return ScratchOrgCreateResponse(
            scratch_org_info_id=self.scratch_org_info_id,
            username=self.username,
            org_id=self._scratch_org.get_org_id(),
            login_url=scratch_org_info_complete.login_url,
            api_version=api_version,
            auth_info=self.auth_info,
            warnings=self.warnings,
        )
