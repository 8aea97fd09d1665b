"""Tests for CLI interface."""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from typer.testing import CliRunner

from modeldb.cli import app
from modeldb.errors import UpstreamError
from modeldb.models.model_artifacts import ArtifactSet
from modeldb.models.model_refresh import RefreshResult, RefreshStatus
from modeldb.storage.permanent_storage.file_store import FileKeyValueStore
from modeldb.storage.version_store import VersionStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MODELDB_ADMIN_TOKEN", raising=False)
    monkeypatch.delenv("MODELDB_DATA_DIR", raising=False)


@pytest.fixture
def published_dir(tmp_path: Path, artifact_set: ArtifactSet) -> Path:
    """A data directory holding one published version."""
    asyncio.run(VersionStore(FileKeyValueStore(tmp_path / "kv")).publish(artifact_set))
    return tmp_path


class TestRefreshCommand:
    """Tests for the refresh command."""

    def test_refresh_updated(self, tmp_path: Path) -> None:
        result = RefreshResult(
            status=RefreshStatus.UPDATED,
            version="20250115120000Z",
            etag='W/"etag-1"',
            model_count=5,
            checked_at="2025-01-15T12:00:00.000Z",
        )
        with patch("modeldb.cli.run_refresh_pipeline", return_value=result) as pipeline:
            output = runner.invoke(app, ["refresh", "--data-dir", str(tmp_path), "--force"])

        assert output.exit_code == 0
        assert "Published new version" in output.stdout
        assert "20250115120000Z" in output.stdout
        pipeline.assert_called_once_with(force=True, data_dir=tmp_path, source_url=None)

    def test_refresh_unchanged(self) -> None:
        result = RefreshResult(
            status=RefreshStatus.UNCHANGED,
            version="20250115120000Z",
            checked_at="2025-01-15T13:00:00.000Z",
        )
        with patch("modeldb.cli.run_refresh_pipeline", return_value=result):
            output = runner.invoke(app, ["refresh"])

        assert output.exit_code == 0
        assert "unchanged" in output.stdout

    def test_refresh_upstream_error(self) -> None:
        with patch(
            "modeldb.cli.run_refresh_pipeline",
            side_effect=UpstreamError("GET failed", status_code=503),
        ):
            output = runner.invoke(app, ["refresh"])

        assert output.exit_code == 1
        assert "Error" in output.stdout


class TestTriggerCommand:
    """Tests for the trigger command."""

    def test_trigger_without_configured_token(self, tmp_path: Path) -> None:
        output = runner.invoke(app, ["trigger", "--token", "guess", "--data-dir", str(tmp_path)])

        assert output.exit_code == 1
        assert "disabled" in output.stdout

    def test_trigger_wrong_token(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MODELDB_ADMIN_TOKEN", "s3cret")
        output = runner.invoke(app, ["trigger", "--token", "guess", "--data-dir", str(tmp_path)])

        assert output.exit_code == 1
        assert "Invalid admin token" in output.stdout


class TestShowCommand:
    """Tests for the show command."""

    def test_show_fallback_before_publish(self, tmp_path: Path) -> None:
        output = runner.invoke(app, ["show", "list", "--data-dir", str(tmp_path)])

        assert output.exit_code == 0
        assert "Served from: fallback" in output.stdout

    def test_show_published_metadata(self, published_dir: Path) -> None:
        output = runner.invoke(app, ["show", "metadata", "--data-dir", str(published_dir)])

        assert output.exit_code == 0
        assert "Served from: durable" in output.stdout
        assert "model_count" in output.stdout

    def test_show_second_read_from_cache(self, published_dir: Path) -> None:
        runner.invoke(app, ["show", "providers", "--data-dir", str(published_dir)])
        output = runner.invoke(app, ["show", "providers", "--data-dir", str(published_dir)])

        assert output.exit_code == 0
        assert "Served from: cache" in output.stdout
        assert "anthropic" in output.stdout

    def test_show_json(self, published_dir: Path) -> None:
        output = runner.invoke(app, ["show", "map", "--json", "--data-dir", str(published_dir)])

        assert output.exit_code == 0
        assert '"claude-3-5-sonnet-latest"' in output.stdout

    def test_show_invalid_kind(self, tmp_path: Path) -> None:
        output = runner.invoke(app, ["show", "everything", "--data-dir", str(tmp_path)])

        assert output.exit_code == 1
        assert "Invalid kind" in output.stdout


class TestManifestCommand:
    """Tests for the manifest command."""

    def test_manifest_empty(self, tmp_path: Path) -> None:
        output = runner.invoke(app, ["manifest", "--data-dir", str(tmp_path)])

        assert output.exit_code == 0
        assert "No version published yet" in output.stdout

    def test_manifest_published(self, published_dir: Path, artifact_set: ArtifactSet) -> None:
        output = runner.invoke(app, ["manifest", "--data-dir", str(published_dir)])

        assert output.exit_code == 0
        assert artifact_set.version in output.stdout


class TestStatsCommand:
    """Tests for the stats command."""

    def test_stats_from_bundled_snapshot(self, tmp_path: Path) -> None:
        output = runner.invoke(app, ["stats", "--data-dir", str(tmp_path)])

        assert output.exit_code == 0
        assert "Total models:" in output.stdout
        assert "3" in output.stdout

    def test_stats_published(self, published_dir: Path) -> None:
        output = runner.invoke(app, ["stats", "--data-dir", str(published_dir)])

        assert output.exit_code == 0
        assert "Deprecated:" in output.stdout
        assert "openai" in output.stdout


class TestSnapshotCommand:
    """Tests for the snapshot command."""

    def test_snapshot(self, tmp_path: Path, artifact_set: ArtifactSet) -> None:
        paths = [tmp_path / "list.json"]
        with patch(
            "modeldb.cli.build_snapshot", new=AsyncMock(return_value=(artifact_set, paths))
        ) as build:
            output = runner.invoke(app, ["snapshot", "--output", str(tmp_path)])

        assert output.exit_code == 0
        assert "Wrote snapshot of 5 models" in output.stdout
        build.assert_awaited_once()

    def test_snapshot_upstream_error(self, tmp_path: Path) -> None:
        with patch(
            "modeldb.cli.build_snapshot", new=AsyncMock(side_effect=UpstreamError("boom"))
        ):
            output = runner.invoke(app, ["snapshot", "--output", str(tmp_path)])

        assert output.exit_code == 1
        assert "boom" in output.stdout
