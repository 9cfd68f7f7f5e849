from datetime import tzinfo
from pathlib import Path

import pytest

from rated.core.config_loader import ConfigLoader
from rated.services.config_service import ConfigService
from rated.store.rating_store import DEFAULT_STORAGE_DIR


@pytest.fixture(autouse=True)
def _fresh_config_cache():
    ConfigService.clear_cache()
    yield
    ConfigService.clear_cache()


def test_config_service_loads(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    (config_dir / "settings.yaml").write_text(
        "logging: {level: DEBUG}\n"
        "storage: {directory: '$RATED_HOME/ratings'}\n"
        "calendar: {timezone: UTC}\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("RATED_HOME", str(tmp_path / "home"))

    service = ConfigService(config_path=config_dir)

    assert service.logging_config == {"level": "DEBUG"}
    storage = service.storage_config
    assert storage.directory == tmp_path / "home" / "ratings"
    assert isinstance(storage.timezone, tzinfo)
    assert str(storage.timezone) == "UTC"


def test_config_service_defaults_without_files(tmp_path: Path) -> None:
    service = ConfigService(config_path=tmp_path / "missing")

    assert service.logging_config == {}
    storage = service.storage_config
    assert storage.directory == DEFAULT_STORAGE_DIR.expanduser()
    assert storage.timezone is None


def test_config_service_reads_env_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "settings.yaml").write_text(
        "storage: {directory: '~/custom'}\n", encoding="utf-8"
    )
    monkeypatch.setenv("RATED_CONFIG_PATH", str(tmp_path))

    service = ConfigService()

    assert service.storage_config.directory == Path("~/custom").expanduser()


def test_unknown_timezone_is_rejected(tmp_path: Path) -> None:
    (tmp_path / "settings.yaml").write_text(
        "calendar: {timezone: Mars/Olympus_Mons}\n", encoding="utf-8"
    )

    with pytest.raises(ValueError):
        ConfigService(config_path=tmp_path).storage_config


def test_loader_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / "settings.yaml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ValueError):
        ConfigLoader(base_path=tmp_path).load("settings")
