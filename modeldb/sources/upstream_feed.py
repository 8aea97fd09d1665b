"""Async client for the upstream model feed.

The feed is a single JSON object mapping raw model names to attribute
objects. A HEAD request exposes the ETag, which serves as the cheap change
token for change detection.
"""

import asyncio
import logging
from typing import Any

import httpx

from modeldb.consts import (
    LITELLM_MODEL_URL,
    UPSTREAM_MAX_RETRIES,
    UPSTREAM_RETRY_STATUSES,
    UPSTREAM_SENTINEL_KEY,
    UPSTREAM_TIMEOUT,
)
from modeldb.errors import UpstreamError
from modeldb.models.model_upstream import UpstreamPayload
from modeldb.sources.rate_limiter import RetryBackoff

logger = logging.getLogger(__name__)


class UpstreamFeed:
    """Fetches the upstream feed with retries on rate limits and server errors.

    Usage:
        async with UpstreamFeed() as feed:
            payload = await feed.fetch()
    """

    def __init__(
        self,
        source_url: str = LITELLM_MODEL_URL,
        timeout: float = UPSTREAM_TIMEOUT,
        max_retries: int = UPSTREAM_MAX_RETRIES,
        client: httpx.AsyncClient | None = None,
        backoff: RetryBackoff | None = None,
    ):
        """Initialize the feed client.

        Args:
            source_url: Feed URL.
            timeout: Per-request timeout in seconds.
            max_retries: Retries for 429 and 5xx responses before giving up.
            client: Pre-built client (tests inject one with a mock transport).
                A client passed in is not closed by ``close()``.
            backoff: Backoff policy. Defaults to exponential with jitter.
        """
        self.source_url = source_url
        self.timeout = timeout
        self._backoff = backoff or RetryBackoff(max_retries=max_retries)
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "UpstreamFeed":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                headers={"Accept": "application/json"},
                follow_redirects=True,
            )
            self._owns_client = True
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this feed created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def _request(self, method: str) -> httpx.Response:
        """Send a request, retrying retryable statuses with backoff.

        Raises:
            UpstreamError: On transport failure, exhausted retries or a
                non-retryable error status.
        """
        client = await self._get_client()
        self._backoff.reset()

        while True:
            try:
                response = await client.request(method, self.source_url)
            except httpx.HTTPError as e:
                raise UpstreamError(f"{method} {self.source_url} failed: {e}") from e

            if response.status_code in UPSTREAM_RETRY_STATUSES and not self._backoff.exhausted:
                delay = self._backoff.next_delay()
                logger.warning(
                    f"Upstream returned {response.status_code}, retrying in {delay:.1f}s "
                    f"(attempt {self._backoff.attempts}/{self._backoff.max_retries})"
                )
                await asyncio.sleep(delay)
                continue

            try:
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise UpstreamError(
                    f"{method} {self.source_url} returned {response.status_code}",
                    status_code=response.status_code,
                ) from e
            self._backoff.reset()
            return response

    async def fetch(self) -> UpstreamPayload:
        """Fetch and parse the full feed.

        Returns:
            UpstreamPayload with the sentinel entry removed and the ETag header.

        Raises:
            UpstreamError: If the request fails or the body is not a JSON object.
        """
        logger.info(f"Fetching upstream feed: {self.source_url}")
        response = await self._request("GET")

        try:
            data = response.json()
        except ValueError as e:
            raise UpstreamError(f"Upstream payload is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise UpstreamError(
                f"Upstream payload must be a JSON object, got {type(data).__name__}"
            )

        data.pop(UPSTREAM_SENTINEL_KEY, None)
        etag = response.headers.get("etag")
        logger.info(f"Fetched {len(data)} upstream entries (etag={etag})")
        return UpstreamPayload(source_url=self.source_url, entries=data, etag=etag)

    async def probe_etag(self) -> str | None:
        """Cheap metadata-only request for the current ETag.

        Best-effort: any failure returns None so the caller falls back to a
        full build.
        """
        try:
            response = await self._request("HEAD")
        except UpstreamError as e:
            logger.warning(f"ETag probe failed: {e}")
            return None
        etag = response.headers.get("etag")
        logger.debug(f"ETag probe returned {etag}")
        return etag
