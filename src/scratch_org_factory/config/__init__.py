"""Application configuration package."""

from .manager import ConfigurationManager, get_config_manager
from .schemas import AppConfig, LoggingConfig, ScratchOrgConfig

__all__ = [
    "ConfigurationManager",
    "get_config_manager",
    "AppConfig",
    "LoggingConfig",
    "ScratchOrgConfig",
]
