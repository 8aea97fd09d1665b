"""Tiered read path: edge cache -> durable store -> bundled snapshot.

Reads never trigger an upstream fetch and never fail because of cache or
durable-store trouble while the bundled snapshot is present.
"""

import asyncio
import logging
from enum import Enum
from typing import Any

from modeldb.consts import EDGE_CACHE_TIMEOUT
from modeldb.models.model_artifacts import ArtifactKind
from modeldb.models.model_cache import CachedResponse
from modeldb.storage.cache.base import EdgeCache
from modeldb.storage.fallback import BundledSnapshot
from modeldb.storage.permanent_storage.base import KeyValueStore
from modeldb.storage.version_store import VersionStore

logger = logging.getLogger(__name__)


class DataTier(str, Enum):
    """Which tier answered a read."""

    CACHE = "cache"
    DURABLE = "durable"
    FALLBACK = "fallback"


class TieredDataStore:
    """Serves the four artifact kinds of the latest published version."""

    def __init__(
        self,
        cache: EdgeCache | None,
        store: KeyValueStore | None,
        fallback: BundledSnapshot | None = None,
        cache_timeout: float = EDGE_CACHE_TIMEOUT,
    ):
        """Initialize the data store.

        Args:
            cache: Edge cache, or None to skip that tier.
            store: Durable store, or None to skip that tier.
            fallback: Bundled snapshot. Defaults to the one shipped in the package.
            cache_timeout: Seconds allowed for each edge cache operation.
        """
        self.cache = cache
        self.versions = VersionStore(store) if store is not None else None
        self.fallback = fallback or BundledSnapshot()
        self.cache_timeout = cache_timeout

    async def _from_cache(self, kind: ArtifactKind) -> Any | None:
        if self.cache is None:
            return None
        try:
            response = await asyncio.wait_for(
                self.cache.match(kind.cache_path), timeout=self.cache_timeout
            )
            return response.read_json() if response is not None else None
        except TimeoutError:
            logger.warning(f"Edge cache timed out for {kind.cache_path}")
        except Exception as e:
            logger.warning(f"Edge cache read failed for {kind.cache_path}: {e}")
        return None

    async def _write_back(self, kind: ArtifactKind, payload: Any) -> None:
        if self.cache is None:
            return
        try:
            await asyncio.wait_for(
                self.cache.put(kind.cache_path, CachedResponse.from_payload(payload)),
                timeout=self.cache_timeout,
            )
        except Exception as e:
            logger.warning(f"Edge cache write-back failed for {kind.cache_path}: {e}")

    async def _from_durable(self, kind: ArtifactKind) -> tuple[Any | None, bool]:
        """Returns (payload, has_version)."""
        if self.versions is None:
            return None, False
        try:
            latest = await self.versions.latest_version()
            if latest is None:
                return None, False
            payload = await self.versions.read_artifact(latest, kind)
        except Exception as e:
            logger.warning(f"Durable store read failed for {kind.value}: {e}")
            return None, True
        if payload is None:
            logger.warning(f"Manifest points at {latest} but {kind.storage_key(latest)} is missing")
        return payload, True

    async def get_with_tier(self, kind: ArtifactKind | str) -> tuple[Any, DataTier]:
        """Read an artifact and report which tier served it."""
        kind = ArtifactKind(kind)

        cached = await self._from_cache(kind)
        if cached is not None:
            return cached, DataTier.CACHE

        payload, has_version = await self._from_durable(kind)
        if payload is not None:
            await self._write_back(kind, payload)
            return payload, DataTier.DURABLE

        if not has_version:
            logger.debug(f"No published version, serving bundled {kind.value}")
        return self.fallback.get(kind), DataTier.FALLBACK

    async def get(self, kind: ArtifactKind | str) -> Any:
        payload, _tier = await self.get_with_tier(kind)
        return payload

    async def get_list(self) -> list[dict[str, Any]]:
        return await self.get(ArtifactKind.LIST)

    async def get_map(self) -> dict[str, dict[str, Any]]:
        return await self.get(ArtifactKind.MAP)

    async def get_providers(self) -> dict[str, list[dict[str, Any]]]:
        return await self.get(ArtifactKind.PROVIDERS)

    async def get_metadata(self) -> dict[str, Any]:
        return await self.get(ArtifactKind.METADATA)

