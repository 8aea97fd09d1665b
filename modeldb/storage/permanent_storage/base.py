"""Abstract base class for durable key-value stores.

The durable store exclusively owns the manifest and every published
version. Values are serialized JSON strings. Published versions are never
deleted.
"""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Async string key-value store.

    Implementations must make each ``put`` visible atomically: a reader sees
    either the old value or the new one, never a partial write.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Read a value.

        Args:
            key: Key such as "manifest" or "20250101120000Z:list".

        Returns:
            Stored string, or None if the key does not exist.
        """
        ...

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Write a value, replacing any existing one."""
        ...
