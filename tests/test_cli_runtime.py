from __future__ import annotations

from datetime import timezone
from pathlib import Path
from typing import Any

import pytest

import rated.cli as cli
from rated.cli import runtime
from rated.services.config_service import StorageConfig


class StubConfigService:
    def __init__(self) -> None:
        self.logging_config = {"level": "WARNING"}
        self.storage_config = StorageConfig(directory=Path("unused"), timezone=timezone.utc)


class RecordingStore:
    def __init__(self, base_dir: Path, **kwargs: Any) -> None:
        self.base_dir = base_dir
        self.kwargs = kwargs


def test_initialize_runtime_wires_store_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    configured: list[dict[str, Any]] = []
    monkeypatch.setattr(cli, "ConfigService", StubConfigService)
    monkeypatch.setattr(cli, "RatingStore", RecordingStore)
    monkeypatch.setattr(runtime, "configure_logging", configured.append)

    config, store = runtime.initialize_runtime()

    assert isinstance(config, StubConfigService)
    assert configured == [{"level": "WARNING"}]
    assert store.base_dir == Path("unused")
    assert store.kwargs == {"tz": timezone.utc}


def test_get_runtime_caches_until_reset(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[int] = []

    def fake_initialize() -> tuple[str, str]:
        calls.append(1)
        return ("config", "store")

    monkeypatch.setattr(runtime, "initialize_runtime", fake_initialize)
    runtime.set_runtime(None)

    assert runtime.get_store() == "store"
    assert runtime.get_config() == "config"
    assert len(calls) == 1

    runtime.set_runtime(None)
    runtime.get_runtime()
    assert len(calls) == 2
    runtime.set_runtime(None)
