"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import os
import threading
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from scratch_org_factory.config.schemas import AppConfig, LoggingConfig, ScratchOrgConfig
from scratch_org_factory.config.utils.env_expansion import expand_config_env_vars
from scratch_org_factory.domain.base.exceptions import ConfigurationError
from scratch_org_factory.infrastructure.utilities.json_utils import read_json_file

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "SOF_CONFIG_FILE"

# Environment variable -> (section, key) in the configuration dictionary.
ENV_OVERRIDES: Dict[str, Tuple[Optional[str], str]] = {
    "SOF_ENVIRONMENT": (None, "environment"),
    "SOF_DEBUG": (None, "debug"),
    "SOF_LOG_LEVEL": ("logging", "level"),
    "SOF_LOG_DESTINATION": ("logging", "destination"),
    "SOF_LOG_FILE": ("logging", "file.path"),
    "SOF_DEFAULT_WAIT_MINUTES": ("scratch_org", "default_wait_minutes"),
    "SOF_DEFAULT_DURATION_DAYS": ("scratch_org", "default_duration_days"),
    "SOF_DEFAULT_RETRY": ("scratch_org", "default_retry"),
}


class ConfigurationManager:
    """
    Single source of truth for application configuration.

    Configuration is read from a JSON file (explicit path, or the path in
    ``SOF_CONFIG_FILE``), has ``${VAR:default}`` references expanded, then
    ``SOF_*`` environment overrides applied. The validated AppConfig is built
    lazily on first access.
    """

    def __init__(self, config_file: Optional[str] = None):
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV)
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        config_data: Dict[str, Any] = {}
        if self._config_file:
            if not os.path.exists(self._config_file):
                raise ConfigurationError(f"Configuration file not found: {self._config_file}")
            config_data = read_json_file(self._config_file)
            logger.debug(f"Loaded configuration from {self._config_file}")

        config_data = expand_config_env_vars(config_data)
        config_data = self.apply_environment_overrides(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``SOF_*`` environment variables on top of file configuration."""
        result = dict(config_data)
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_name)
            if value is None:
                continue
            target = result
            if section is not None:
                target = dict(result.get(section) or {})
                result[section] = target
            *parents, leaf = key.split(".")
            for parent in parents:
                target[parent] = dict(target.get(parent) or {})
                target = target[parent]
            target[leaf] = value
        return result

    def get_logging_config(self) -> LoggingConfig:
        return self.app_config.logging

    def get_scratch_org_config(self) -> ScratchOrgConfig:
        return self.app_config.scratch_org

    def reload(self) -> None:
        """Discard the cached configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None


_config_manager: Optional[ConfigurationManager] = None


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager."""
    global _config_manager
    if _config_manager is None or config_file is not None:
        _config_manager = ConfigurationManager(config_file)
    return _config_manager
