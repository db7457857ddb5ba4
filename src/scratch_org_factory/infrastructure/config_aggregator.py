"""Merged view over global, local and environment user configuration."""

import json
import os
import re
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from scratch_org_factory.domain.base.exceptions import ConfigurationError
from scratch_org_factory.domain.scratch_org.ports import ConfigAggregatorPort
from scratch_org_factory.infrastructure.logging.logger import get_logger
from scratch_org_factory.infrastructure.project import find_project_root
from scratch_org_factory.infrastructure.utilities.json_utils import read_json_file

logger = get_logger(__name__)

STATE_FOLDER = ".sfdx"
CONFIG_FILE_NAME = "sfdx-config.json"
ENV_PREFIX = "SFDX_"


class ConfigLocation(str, Enum):
    """Where a configuration value came from."""

    GLOBAL = "Global"
    LOCAL = "Local"
    ENVIRONMENT = "Environment"


def property_to_env_name(key: str) -> str:
    """``apiVersion`` -> ``SFDX_API_VERSION``."""
    snake = re.sub(r"(?<!^)(?=[A-Z])", "_", key)
    return ENV_PREFIX + snake.upper()


def _read_config_file(path: Path) -> Dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        return read_json_file(str(path))
    except (json.JSONDecodeError, ValueError) as e:
        raise ConfigurationError(f"Unable to parse config file {path}: {e}") from e


class ConfigAggregator(ConfigAggregatorPort):
    """
    Resolves configuration properties with precedence
    environment > local (project) > global (home directory).
    """

    def __init__(
        self,
        global_config: Optional[Dict[str, Any]] = None,
        local_config: Optional[Dict[str, Any]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        self._global = dict(global_config or {})
        self._local = dict(local_config or {})
        self._environ = os.environ if environ is None else environ

    @classmethod
    def create(
        cls,
        project_path: Optional[str] = None,
        home: Optional[str] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "ConfigAggregator":
        """Load the global config from the home directory and the local config from the enclosing project, if any."""
        home_dir = Path(home or Path.home())
        global_config = _read_config_file(home_dir / STATE_FOLDER / CONFIG_FILE_NAME)

        local_config: Dict[str, Any] = {}
        project_root = find_project_root(project_path)
        if project_root is not None:
            local_config = _read_config_file(project_root / STATE_FOLDER / CONFIG_FILE_NAME)

        logger.debug("Loaded user configuration", global_keys=sorted(global_config), local_keys=sorted(local_config))

        return cls(global_config, local_config, environ)

    def _env_value(self, key: str) -> Optional[str]:
        return self._environ.get(property_to_env_name(key))

    def get_property_value(self, key: str) -> Optional[Any]:
        env_value = self._env_value(key)
        if env_value is not None:
            return env_value
        if key in self._local:
            return self._local[key]
        return self._global.get(key)

    def get_location(self, key: str) -> Optional[ConfigLocation]:
        if self._env_value(key) is not None:
            return ConfigLocation.ENVIRONMENT
        if key in self._local:
            return ConfigLocation.LOCAL
        if key in self._global:
            return ConfigLocation.GLOBAL
        return None

    def get_config(self) -> Dict[str, Any]:
        """All known properties merged, environment values included for known keys."""
        merged = {**self._global, **self._local}
        for key in list(merged):
            env_value = self._env_value(key)
            if env_value is not None:
                merged[key] = env_value
        return merged
