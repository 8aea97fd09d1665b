"""Change detection: skip the full build when upstream has not changed."""

import logging

from modeldb.models.model_artifacts import ArtifactSet
from modeldb.models.model_manifest import Manifest
from modeldb.sources.upstream_feed import UpstreamFeed

logger = logging.getLogger(__name__)


class ChangeDetector:
    """Compares upstream change tokens with the one recorded in the manifest.

    Two checks are available:
    - ``is_unchanged``: cheap HEAD probe before any fetch
    - ``artifacts_unchanged``: full token (ETag or content fingerprint) after a build
    """

    def __init__(self, feed: UpstreamFeed):
        self.feed = feed

    @staticmethod
    def _has_baseline(manifest: Manifest | None) -> bool:
        return manifest is not None and manifest.latest is not None and bool(manifest.etag)

    async def probe(self) -> str | None:
        """Fetch the cheap change token. None when unavailable."""
        try:
            return await self.feed.probe_etag()
        except Exception as e:
            logger.warning(f"Change probe raised unexpectedly: {e}")
            return None

    async def is_unchanged(self, manifest: Manifest | None) -> bool:
        """True only when the probe succeeds and matches the manifest's token.

        A failed probe means "changed" so the caller does a full build.
        """
        if not self._has_baseline(manifest):
            return False
        token = await self.probe()
        if token is None:
            logger.info("No change token from probe, proceeding with full build")
            return False
        if token == manifest.etag:
            logger.info(f"Upstream unchanged (etag={token})")
            return True
        logger.info(f"Upstream changed: {manifest.etag} -> {token}")
        return False

    def artifacts_unchanged(self, artifacts: ArtifactSet, manifest: Manifest | None) -> bool:
        """True when a built set carries the same token as the latest version."""
        if not self._has_baseline(manifest):
            return False
        return artifacts.etag == manifest.etag
