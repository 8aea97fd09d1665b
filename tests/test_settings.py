"""Tests for settings resolution."""

from pathlib import Path

import pytest

from modeldb.consts import LITELLM_MODEL_URL, REFRESH_INTERVAL_SECONDS
from modeldb.errors import ConfigurationError
from modeldb.settings import load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "MODELDB_DATA_DIR",
        "MODELDB_SOURCE_URL",
        "MODELDB_ADMIN_TOKEN",
        "MODELDB_REFRESH_INTERVAL",
        "MODELDB_CACHE_TIMEOUT",
        "MODELDB_CACHE_TTL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.source_url == LITELLM_MODEL_URL
        assert settings.refresh_interval_seconds == REFRESH_INTERVAL_SECONDS
        assert settings.admin_token is None
        assert settings.cache_timeout_seconds == 0.5

    def test_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("MODELDB_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("MODELDB_ADMIN_TOKEN", "s3cret")
        monkeypatch.setenv("MODELDB_REFRESH_INTERVAL", "600")

        settings = load_settings()

        assert settings.data_dir == tmp_path
        assert settings.kv_dir == tmp_path / "kv"
        assert settings.cache_dir == tmp_path / "cache"
        assert settings.admin_token == "s3cret"
        assert settings.refresh_interval_seconds == 600

    def test_arguments_override_environment(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        monkeypatch.setenv("MODELDB_SOURCE_URL", "https://env.test/feed.json")
        monkeypatch.setenv("MODELDB_CACHE_TTL", "10")

        settings = load_settings(
            data_dir=tmp_path, source_url="https://arg.test/feed.json", cache_ttl_seconds=0
        )

        assert settings.source_url == "https://arg.test/feed.json"
        assert settings.cache_ttl_seconds == 0
        assert settings.data_dir == tmp_path

    def test_invalid_number(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MODELDB_CACHE_TIMEOUT", "fast")
        with pytest.raises(ConfigurationError, match="MODELDB_CACHE_TIMEOUT"):
            load_settings()
