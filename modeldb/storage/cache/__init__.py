"""Edge cache backends."""

from modeldb.storage.cache.base import EdgeCache
from modeldb.storage.cache.file_caching import FileEdgeCache
from modeldb.storage.cache.memory_cache import MemoryEdgeCache

__all__ = ["EdgeCache", "FileEdgeCache", "MemoryEdgeCache"]
