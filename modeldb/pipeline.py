"""Refresh pipeline orchestration.

Steps:
1. Read the manifest
2. Cheap change check (skipped when forced or before the first version)
3. Fetch and build artifacts
4. Full-token change check
5. Publish version and advance the manifest
6. Warm the edge cache
"""

import asyncio
import logging
from datetime import UTC, datetime
from pathlib import Path

from modeldb.change_detector import ChangeDetector
from modeldb.models.common import _utc_now, iso_timestamp
from modeldb.models.model_artifacts import ArtifactSet
from modeldb.models.model_manifest import Manifest
from modeldb.models.model_refresh import RefreshResult, RefreshStatus
from modeldb.settings import Settings, load_settings
from modeldb.sources.upstream_feed import UpstreamFeed
from modeldb.storage.cache.base import EdgeCache
from modeldb.storage.cache.file_caching import FileEdgeCache
from modeldb.storage.cache_warmer import warm_cache
from modeldb.storage.fallback import export_snapshot
from modeldb.storage.permanent_storage.file_store import FileKeyValueStore
from modeldb.storage.version_store import VersionStore
from modeldb.transform.artifact_builder import build_artifacts

logger = logging.getLogger(__name__)


def _unchanged(manifest: Manifest | None) -> RefreshResult:
    latest_entry = manifest.versions[-1] if manifest and manifest.versions else None
    return RefreshResult(
        status=RefreshStatus.UNCHANGED,
        version=manifest.latest if manifest else None,
        etag=manifest.etag if manifest else None,
        model_count=latest_entry.model_count if latest_entry else None,
        checked_at=(manifest.checked_at if manifest else None) or iso_timestamp(_utc_now()),
    )


async def run_refresh(
    feed: UpstreamFeed,
    versions: VersionStore,
    cache: EdgeCache | None = None,
    force: bool = False,
) -> RefreshResult:
    """Run one refresh: detect change, build, publish, warm.

    Args:
        feed: Upstream feed client.
        versions: Version/manifest store on the durable store.
        cache: Edge cache to warm after publishing. None skips warming.
        force: Skip both change checks and always publish a new version.

    Returns:
        RefreshResult describing what happened.

    Raises:
        UpstreamError: Fetch or parse failed. Nothing was published.
        PublishError: An artifact write failed. The manifest was not advanced.
    """
    start_time = datetime.now(UTC)
    detector = ChangeDetector(feed)

    logger.info("Step 1/6: Reading manifest...")
    manifest = await versions.read_manifest()
    logger.info(f"Current latest version: {manifest.latest if manifest else None}")

    logger.info("Step 2/6: Checking upstream change token...")
    if force:
        logger.info("Forced refresh, skipping change detection")
    elif await detector.is_unchanged(manifest):
        manifest = await versions.record_check(manifest)
        return _unchanged(manifest)

    logger.info("Step 3/6: Fetching and building artifacts...")
    artifacts = await build_artifacts(
        feed=feed, previous_version=manifest.latest if manifest else None
    )

    logger.info("Step 4/6: Comparing content token...")
    if not force and detector.artifacts_unchanged(artifacts, manifest):
        logger.info(f"Built content matches {manifest.latest}, skipping publish")
        manifest = await versions.record_check(manifest)
        return _unchanged(manifest)

    logger.info("Step 5/6: Publishing version...")
    manifest = await versions.publish(artifacts)

    logger.info("Step 6/6: Warming edge cache...")
    if cache is not None:
        await warm_cache(cache, artifacts)
    else:
        logger.info("No edge cache configured, skipping warm")

    elapsed = (datetime.now(UTC) - start_time).total_seconds()
    logger.info(f"Refresh complete in {elapsed:.1f}s: version {artifacts.version}")
    return RefreshResult(
        status=RefreshStatus.UPDATED,
        version=artifacts.version,
        etag=artifacts.etag,
        model_count=artifacts.metadata.model_count,
        checked_at=manifest.checked_at or iso_timestamp(_utc_now()),
        forced=force,
    )


def open_stores(settings: Settings) -> tuple[FileKeyValueStore, FileEdgeCache]:
    """File-backed durable store and edge cache under the settings' data dir."""
    store = FileKeyValueStore(settings.kv_dir)
    cache = FileEdgeCache(settings.cache_dir, default_ttl=settings.cache_ttl_seconds)
    return store, cache


async def _refresh_with_settings(settings: Settings, force: bool) -> RefreshResult:
    store, cache = open_stores(settings)
    async with UpstreamFeed(source_url=settings.source_url) as feed:
        return await run_refresh(feed, VersionStore(store), cache, force=force)


def run_refresh_pipeline(
    force: bool = False,
    data_dir: Path | None = None,
    source_url: str | None = None,
) -> RefreshResult:
    """Run one refresh against the file-backed stores.

    Args:
        force: Skip change detection.
        data_dir: Data directory. Uses settings resolution if None.
        source_url: Upstream URL. Uses settings resolution if None.

    Returns:
        RefreshResult.
    """
    settings = load_settings(data_dir=data_dir, source_url=source_url)
    logger.info(f"Starting refresh (force={force}) into {settings.data_dir}")
    return asyncio.run(_refresh_with_settings(settings, force))


async def build_snapshot(source_url: str, output_dir: Path) -> tuple[ArtifactSet, list[Path]]:
    """Fetch, build and write the bundled fallback snapshot.

    Args:
        source_url: Upstream URL.
        output_dir: Directory for list/map/providers/metadata JSON files.

    Returns:
        Tuple of (artifacts, written paths).
    """
    artifacts = await build_artifacts(source_url=source_url)
    return artifacts, export_snapshot(artifacts.payloads(), output_dir)
