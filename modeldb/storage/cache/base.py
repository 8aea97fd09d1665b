"""Abstract base class for edge cache backends.

The edge cache holds disposable copies of the latest artifacts under fixed
well-known paths. Losing it is always safe: the read path rebuilds entries
from the durable store.
"""

from abc import ABC, abstractmethod

from modeldb.models.model_cache import CachedResponse


class EdgeCache(ABC):
    """Async path-keyed response cache.

    Entries past their Cache-Control max-age (or the backend's TTL) are
    treated as missing.
    """

    @abstractmethod
    async def match(self, path: str) -> CachedResponse | None:
        """Look up a cached response.

        Args:
            path: Well-known path, e.g. "/cache/v1/latest/list.json".

        Returns:
            Cached response if present and fresh, None otherwise.
        """
        ...

    @abstractmethod
    async def put(self, path: str, response: CachedResponse) -> None:
        """Store a response, replacing any existing entry for the path."""
        ...
