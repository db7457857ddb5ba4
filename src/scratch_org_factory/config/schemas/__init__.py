"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LogDestination, LogFileConfig, LoggingConfig, LogLevel
from .scratch_org_schema import ScratchOrgConfig

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "LogFileConfig",
    "LogLevel",
    "LogDestination",
    "ScratchOrgConfig",
]
