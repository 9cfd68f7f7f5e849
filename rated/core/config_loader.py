"""YAML configuration loading for the rater.

Updates:
    v0.1.0 - 2026-10-19 - Config directory resolved from RATED_CONFIG_PATH.
    v0.1.1 - 2026-10-19 - Missing directories and files read as empty mappings.
"""

from __future__ import annotations

import functools
import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "RATED_CONFIG_PATH"


class ConfigLoader:
    """Reads `<name>.yaml` documents from a configuration directory.

    Unlike a strict loader, absent files are not fatal: the rater must always
    start, so a missing document is reported as an empty mapping and the
    caller applies its own defaults.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        """Resolve the configuration directory.

        Args:
            base_path (Path | None): Explicit directory; falls back to the
                `RATED_CONFIG_PATH` environment variable, then `./config`.
        """

        raw = base_path or Path(os.environ.get(CONFIG_ENV_VAR, "config"))
        self._base_path = Path(raw).expanduser().resolve()

    @property
    def base_path(self) -> Path:
        return self._base_path

    def path_for(self, name: str) -> Path:
        candidate = self._base_path / name
        if candidate.suffix != ".yaml":
            candidate = candidate.with_suffix(".yaml")
        return candidate

    @functools.lru_cache(maxsize=None)
    def load(self, name: str) -> Dict[str, Any]:
        """Load and cache a configuration document.

        Args:
            name (str): Logical configuration name (with or without `.yaml`).

        Returns:
            dict[str, Any]: Parsed YAML mapping, or `{}` when the file is absent.

        Raises:
            ValueError: If the document exists but is not a YAML mapping.
        """

        path = self.path_for(name)
        if not path.is_file():
            logger.debug("Config file not found; using defaults.", extra={"path": str(path)})
            return {}
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data
