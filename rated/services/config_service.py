"""Configuration service for the rater.

Updates:
    v0.1.0 - 2026-10-19 - Typed access to storage, calendar and logging settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.config_loader import ConfigLoader
from ..store.rating_store import DEFAULT_STORAGE_DIR


@dataclass(slots=True, frozen=True)
class StorageConfig:
    """Where rating records live and which calendar decides "today"."""

    directory: Path
    timezone: tzinfo | None = None


class ConfigService:
    """Loads settings.yaml and exposes its sections with defaults applied."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize configuration caches.

        Args:
            config_path (Path | None): Optional override for the configuration directory.
        """

        self._loader = ConfigLoader(base_path=config_path)
        self._settings = self._loader.load("settings")

    @property
    def logging_config(self) -> dict[str, Any]:
        """Return logging configuration settings."""
        return self._section("logging")

    @property
    def storage_config(self) -> StorageConfig:
        """Return the resolved storage directory and calendar zone.

        Raises:
            ValueError: If `calendar.timezone` names an unknown zone.
        """

        storage = self._section("storage")
        raw_directory = storage.get("directory") or str(DEFAULT_STORAGE_DIR)
        directory = Path(os.path.expandvars(str(raw_directory))).expanduser()

        zone_name = self._section("calendar").get("timezone")
        return StorageConfig(directory=directory, timezone=self._resolve_zone(zone_name))

    @staticmethod
    def clear_cache() -> None:
        """Clear cached configuration to reflect file updates."""

        ConfigLoader.load.cache_clear()

    def _section(self, name: str) -> dict[str, Any]:
        section = self._settings.get(name, {})
        return dict(section) if isinstance(section, dict) else {}

    @staticmethod
    def _resolve_zone(zone_name: Any) -> tzinfo | None:
        if zone_name is None or not str(zone_name).strip():
            return None
        try:
            return ZoneInfo(str(zone_name).strip())
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown calendar timezone: {zone_name}") from exc
