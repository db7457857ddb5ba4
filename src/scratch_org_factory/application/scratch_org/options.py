"""Options accepted by the scratch org creation use case."""
from datetime import timedelta
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from scratch_org_factory.config.manager import ConfigurationManager, get_config_manager
from scratch_org_factory.config.schemas import ScratchOrgConfig
from scratch_org_factory.domain.scratch_org.ports import ConfigAggregatorPort, HubOrgPort


class ScratchOrgCreateOptions(BaseModel):
    """Everything a single scratch org creation needs from its caller."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    hub_org: HubOrgPort
    config_aggregator: ConfigAggregatorPort
    connected_app_consumer_key: Optional[str] = None
    duration_days: Optional[int] = None
    nonamespace: bool = False
    noancestors: bool = False
    wait: timedelta = Field(default_factory=lambda: timedelta(minutes=6))
    setdefaultusername: bool = False
    setalias: Optional[str] = None
    retry: Optional[int] = 0
    apiversion: Optional[str] = None
    definitionjson: Optional[str] = None
    definitionfile: Optional[str] = None
    org_config: Optional[Dict[str, Any]] = None
    test: bool = False
    client_secret: Optional[str] = None

    @field_validator("retry")
    @classmethod
    def validate_retry(cls, v: Optional[int]) -> Optional[int]:
        """Validate retry count."""
        if v is not None and v < 0:
            raise ValueError("Retry count must not be negative")
        return v

    @classmethod
    def with_defaults(cls, defaults: ScratchOrgConfig, **options: Any) -> "ScratchOrgCreateOptions":
        """Build options, taking wait, duration and retry from configuration when not given."""
        if options.get("wait") is None:
            options["wait"] = timedelta(minutes=defaults.default_wait_minutes)
        if options.get("duration_days") is None:
            options["duration_days"] = defaults.default_duration_days
        if options.get("retry") is None:
            options["retry"] = defaults.default_retry
        return cls(**options)

    @classmethod
    def from_config(
        cls, config_manager: Optional[ConfigurationManager] = None, **options: Any
    ) -> "ScratchOrgCreateOptions":
        """
        Build options with defaults from application configuration.

        This is the entry point for callers; unset wait, duration and retry
        come from the ``scratch_org`` section of the configuration.

        Args:
            config_manager: Configuration source (default: the process-wide manager)
            **options: Option values supplied by the caller
        """
        manager = config_manager or get_config_manager()
        return cls.with_defaults(manager.get_scratch_org_config(), **options)
