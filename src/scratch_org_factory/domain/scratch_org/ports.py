"""Domain ports for the remote platform operations used during scratch org creation."""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Any, Dict, List, Optional

from scratch_org_factory.domain.scratch_org.settings_generator import SettingsGenerator
from scratch_org_factory.domain.scratch_org.value_objects import (
    ScratchOrgInfoRecord,
    ScratchOrgInfoRequestResult,
)


class HubOrgPort(ABC):
    """The persistent org that requests and tracks scratch orgs."""

    @abstractmethod
    def get_username(self) -> Optional[str]:
        """Get the username the hub is authorized as."""

    @abstractmethod
    def get_client_id(self) -> Optional[str]:
        """Get the connected app client id used to authorize the hub."""


class ScratchOrgInfoApiPort(ABC):
    """Remote org-info operations against the hub and the new org."""

    @abstractmethod
    async def request_scratch_org_creation(
        self,
        hub_org: HubOrgPort,
        scratch_org_info: Dict[str, Any],
        settings: SettingsGenerator,
    ) -> ScratchOrgInfoRequestResult:
        """Create the org-info record on the hub."""

    @abstractmethod
    async def poll_for_scratch_org_info(
        self, hub_org: HubOrgPort, scratch_org_info_id: str, timeout: timedelta
    ) -> ScratchOrgInfoRecord:
        """Wait until the org-info record reaches a completed state."""

    @abstractmethod
    async def authorize_scratch_org(
        self,
        *,
        scratch_org_info_complete: ScratchOrgInfoRecord,
        hub_org: HubOrgPort,
        client_secret: Optional[str],
        set_as_default: bool,
        alias: Optional[str],
        signup_target_login_url_config: Optional[str],
        retry: int,
    ) -> Any:
        """Authorize a session against the new org and return its auth info."""

    @abstractmethod
    async def deploy_settings_and_resolve_url(
        self, auth_info: Any, api_version: str, settings: SettingsGenerator
    ) -> Any:
        """Deploy extracted settings to the new org and return the updated auth info."""


class ScratchOrgConnectionPort(ABC):
    """A live connection to the newly created org."""

    @abstractmethod
    def get_username(self) -> Optional[str]:
        """Get the username of the connection."""

    @abstractmethod
    def get_org_id(self) -> Optional[str]:
        """Get the org id of the connection."""

    @abstractmethod
    async def retrieve_max_api_version(self) -> str:
        """Get the highest API version the org supports."""

    @abstractmethod
    async def tooling_find(
        self, sobject: str, conditions: Dict[str, Any], fields: List[str]
    ) -> List[Dict[str, Any]]:
        """Query tooling records matching the conditions."""

    @abstractmethod
    async def tooling_update(self, sobject: str, records: List[Dict[str, Any]]) -> Any:
        """Update tooling records by id."""


class OrgConnectorPort(ABC):
    """Creates connections to orgs from auth info."""

    @abstractmethod
    async def connect(self, auth_info: Any) -> ScratchOrgConnectionPort:
        """Open a connection for the given auth info."""


class ProjectPort(ABC):
    """A resolved local project."""

    @abstractmethod
    def get_path(self) -> str:
        """Get the project root directory."""

    @abstractmethod
    async def resolve_project_config(self) -> Dict[str, Any]:
        """Get the project configuration."""


class ProjectResolverPort(ABC):
    """Locates the local project, if there is one."""

    @abstractmethod
    async def resolve(self, path: Optional[str] = None) -> ProjectPort:
        """Resolve the project containing path, raising ProjectNotFoundError when absent."""


class ConfigAggregatorPort(ABC):
    """Read access to the merged user configuration."""

    @abstractmethod
    def get_property_value(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None when unset."""
