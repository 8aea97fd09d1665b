"""In-process edge cache for long-lived processes and tests."""

import logging

from modeldb.models.model_cache import CachedResponse
from modeldb.storage.cache.base import EdgeCache

logger = logging.getLogger(__name__)


class MemoryEdgeCache(EdgeCache):
    """Dict-backed edge cache honoring each entry's Cache-Control max-age."""

    def __init__(self) -> None:
        self._entries: dict[str, CachedResponse] = {}

    def __len__(self) -> int:
        return len(self._entries)

    async def match(self, path: str) -> CachedResponse | None:
        response = self._entries.get(path)
        if response is None:
            return None
        if not response.is_fresh():
            logger.debug(f"Edge cache entry expired: {path}")
            del self._entries[path]
            return None
        return response

    async def put(self, path: str, response: CachedResponse) -> None:
        self._entries[path] = response
        logger.debug(f"Edge cache stored {path} ({len(response.body)} bytes)")
