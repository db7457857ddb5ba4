"""Extraction of post-create settings from a scratch org definition."""

from typing import Any, Dict, List, Optional

from scratch_org_factory.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

SETTINGS_KEYS = ("settings", "objectSettings")


class SettingsGenerator:
    """
    Holds the settings sections of a scratch org definition.

    The sections are deployed to the new org after it is authorized; they are
    never sent to the hub with the org-info record.
    """

    def __init__(self) -> None:
        self._settings_data: Optional[Dict[str, Any]] = None
        self._object_settings_data: Optional[Dict[str, Any]] = None

    async def extract(self, scratch_def: Dict[str, Any]) -> None:
        """Pull the ``settings`` and ``objectSettings`` sections out of a definition."""
        self._settings_data = scratch_def.get("settings") or None
        self._object_settings_data = scratch_def.get("objectSettings") or None
        logger.debug(
            "Extracted scratch org settings",
            settings=self.get_settings_names(),
            object_settings=sorted(self._object_settings_data or {}),
        )

    def has_settings(self) -> bool:
        return bool(self._settings_data) or bool(self._object_settings_data)

    @property
    def settings_data(self) -> Optional[Dict[str, Any]]:
        return self._settings_data

    @property
    def object_settings_data(self) -> Optional[Dict[str, Any]]:
        return self._object_settings_data

    def get_settings_names(self) -> List[str]:
        """Metadata type names of the settings sections, e.g. ``lightningExperienceSettings`` -> ``LightningExperienceSettings``."""
        return [key[:1].upper() + key[1:] for key in sorted(self._settings_data or {})]
