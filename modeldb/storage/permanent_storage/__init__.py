"""Durable key-value store backends."""

from modeldb.storage.permanent_storage.base import KeyValueStore
from modeldb.storage.permanent_storage.file_store import FileKeyValueStore
from modeldb.storage.permanent_storage.memory_store import MemoryKeyValueStore

__all__ = ["FileKeyValueStore", "KeyValueStore", "MemoryKeyValueStore"]
