"""In-process key-value store for tests and single-process deployments."""

import logging

from modeldb.storage.permanent_storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class MemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Counts reads so callers can assert tier behavior."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})
        self.reads = 0
        self.writes = 0

    def __len__(self) -> int:
        return len(self._data)

    async def get(self, key: str) -> str | None:
        self.reads += 1
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self.writes += 1
        self._data[key] = value
        logger.debug(f"Stored key={key} ({len(value)} bytes)")

    def list_keys(self, prefix: str = "") -> list[str]:
        """List stored keys starting with ``prefix``, sorted. Inspection helper."""
        return sorted(key for key in self._data if key.startswith(prefix))
