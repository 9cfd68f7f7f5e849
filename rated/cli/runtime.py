"""Runtime wiring for the rater CLI."""

from __future__ import annotations

import logging
from typing import Any

from rated.core.logging_setup import configure_logging
from rated.core.logging_setup import set_runtime_level  # re-export via utils
from rated.services.config_service import ConfigService
from rated.store.rating_store import RatingStore

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: tuple[ConfigService, RatingStore] | None = None

_DEFAULT_CONFIG_SERVICE = ConfigService
_DEFAULT_RATING_STORE = RatingStore


def initialize_runtime() -> tuple[ConfigService, RatingStore]:
    """Load configuration, set up logging and open the rating store."""

    config_service_cls = _resolve_dependency("ConfigService", _DEFAULT_CONFIG_SERVICE)
    config_service = config_service_cls()
    configure_logging(config_service.logging_config)
    logger.debug("Runtime initialization starting.")

    storage = config_service.storage_config
    store_cls = _resolve_dependency("RatingStore", _DEFAULT_RATING_STORE)
    store = store_cls(storage.directory, tz=storage.timezone)
    logger.debug("Rating store ready.", extra={"path": str(storage.directory)})
    return config_service, store


def get_runtime() -> tuple[ConfigService, RatingStore]:
    """Return the lazily-initialized configuration and store."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: tuple[ConfigService, RatingStore] | None) -> None:
    """Replace (or with `None`, drop) the cached runtime tuple."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_store() -> RatingStore:
    """Return the cached rating store."""

    _, store = get_runtime()
    return store


def get_config() -> ConfigService:
    """Return the cached configuration service."""

    config_service, _ = get_runtime()
    return config_service


def _resolve_dependency(name: str, default: Any) -> Any:
    """Return a dependency, preferring overrides on the cli package."""

    from sys import modules

    cli_module = modules.get("rated.cli")
    if cli_module is not None and hasattr(cli_module, name):
        return getattr(cli_module, name)
    return default


__all__ = [
    "get_config",
    "get_runtime",
    "get_store",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
