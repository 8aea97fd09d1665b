"""Periodic refresh loop and the authenticated manual trigger.

No mutual exclusion is applied between the timer and manual triggers.
Overlapping refreshes both publish and the later manifest write wins.
"""

import asyncio
import hmac
import logging

from modeldb.consts import REFRESH_INTERVAL_SECONDS
from modeldb.errors import UnauthorizedError
from modeldb.models.model_refresh import RefreshResult
from modeldb.pipeline import run_refresh
from modeldb.sources.upstream_feed import UpstreamFeed
from modeldb.storage.cache.base import EdgeCache
from modeldb.storage.version_store import VersionStore

logger = logging.getLogger(__name__)


def verify_admin_token(provided: str | None, expected: str | None) -> None:
    """Reject a manual trigger unless the token matches the configured one.

    Raises:
        UnauthorizedError: If no admin token is configured, none was given,
            or they differ.
    """
    if not expected:
        raise UnauthorizedError("Manual refresh is disabled: no admin token configured")
    if not provided or not hmac.compare_digest(provided.encode(), expected.encode()):
        raise UnauthorizedError("Invalid admin token")


class RefreshScheduler:
    """Runs the refresh flow on a fixed interval and on demand."""

    def __init__(
        self,
        feed: UpstreamFeed,
        versions: VersionStore,
        cache: EdgeCache | None = None,
        interval_seconds: float = REFRESH_INTERVAL_SECONDS,
        admin_token: str | None = None,
    ):
        """Initialize the scheduler.

        Args:
            feed: Upstream feed client.
            versions: Version/manifest store.
            cache: Edge cache warmed after each publish.
            interval_seconds: Seconds between scheduled runs.
            admin_token: Token required by ``trigger``. None disables it.
        """
        self.feed = feed
        self.versions = versions
        self.cache = cache
        self.interval_seconds = interval_seconds
        self._admin_token = admin_token
        self._stop = asyncio.Event()
        self.runs = 0
        self.failures = 0

    def stop(self) -> None:
        """Ask ``run_forever`` to exit after the current run."""
        self._stop.set()

    async def run_once(self, force: bool = False) -> RefreshResult:
        """Run one refresh. Errors propagate to the caller."""
        self.runs += 1
        return await run_refresh(self.feed, self.versions, self.cache, force=force)

    async def run_forever(self, max_runs: int | None = None) -> None:
        """Refresh every ``interval_seconds`` until stopped.

        A failed run is logged and does not stop the loop. The previous
        version keeps serving reads.

        Args:
            max_runs: Stop after this many runs (None runs until ``stop()``).
        """
        logger.info(f"Scheduler started (interval={self.interval_seconds}s)")
        self._stop.clear()
        completed = 0

        while not self._stop.is_set():
            try:
                result = await self.run_once()
                logger.info(f"Scheduled refresh {result.status.value}: version={result.version}")
            except Exception as e:
                self.failures += 1
                logger.error(f"Scheduled refresh failed: {e}")

            completed += 1
            if max_runs is not None and completed >= max_runs:
                break

            try:
                await asyncio.wait_for(self._stop.wait(), timeout=self.interval_seconds)
            except TimeoutError:
                continue

        logger.info(f"Scheduler stopped after {completed} runs ({self.failures} failed)")

    async def trigger(self, token: str | None, force: bool = False) -> RefreshResult:
        """Manual refresh entry point.

        The token is checked before any refresh work. Without ``force`` the
        cheap change check runs first.

        Raises:
            UnauthorizedError: On a missing or wrong token.
        """
        verify_admin_token(token, self._admin_token)
        logger.info(f"Manual refresh triggered (force={force})")
        return await self.run_once(force=force)
