"""Storage backends for published catalog data.

This module provides:
- KeyValueStore: Abstract base class for the durable store
- FileKeyValueStore / MemoryKeyValueStore: durable store implementations
- EdgeCache: Abstract base class for the edge cache
- FileEdgeCache / MemoryEdgeCache: edge cache implementations
- VersionStore: versioned artifacts and the manifest
- TieredDataStore: the cache -> durable -> bundled read path
"""

from modeldb.storage.cache.base import EdgeCache
from modeldb.storage.cache.file_caching import FileEdgeCache
from modeldb.storage.cache.memory_cache import MemoryEdgeCache
from modeldb.storage.cache_warmer import warm_cache
from modeldb.storage.data_store import DataTier, TieredDataStore
from modeldb.storage.fallback import BundledSnapshot, export_snapshot
from modeldb.storage.permanent_storage.base import KeyValueStore
from modeldb.storage.permanent_storage.file_store import FileKeyValueStore
from modeldb.storage.permanent_storage.memory_store import MemoryKeyValueStore
from modeldb.storage.version_store import VersionStore

__all__ = [
    "BundledSnapshot",
    "DataTier",
    "EdgeCache",
    "FileEdgeCache",
    "FileKeyValueStore",
    "KeyValueStore",
    "MemoryEdgeCache",
    "MemoryKeyValueStore",
    "TieredDataStore",
    "VersionStore",
    "export_snapshot",
    "warm_cache",
]
