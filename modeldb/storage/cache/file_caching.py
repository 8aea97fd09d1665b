"""File-based edge cache.

Keeps the latest artifacts across CLI invocations. Each entry is one JSON
file named by a hash of its path and carries the metadata needed for expiry.
"""

import asyncio
import hashlib
import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from modeldb.consts import DEFAULT_DATA_DIR, EDGE_CACHE_MAX_AGE
from modeldb.models.model_cache import CachedResponse
from modeldb.storage.cache.base import EdgeCache
from modeldb.storage.permanent_storage.file_store import atomic_write_text

logger = logging.getLogger(__name__)


class FileEdgeCache(EdgeCache):
    """File-based edge cache with TTL support.

    Directory structure:
        {cache_dir}/
        ├── {hash}.json
        └── {hash}.json

    Each file holds {cached_at, path, ttl, response}. An entry expires when
    either the backend TTL or the response's own max-age has elapsed.
    """

    def __init__(
        self,
        cache_dir: Path | str | None = None,
        default_ttl: int = EDGE_CACHE_MAX_AGE,
    ):
        """Initialize FileEdgeCache.

        Args:
            cache_dir: Directory for cache files. Defaults to {DEFAULT_DATA_DIR}/cache.
            default_ttl: TTL in seconds. 0 means entries expire only by max-age.
        """
        if cache_dir is None:
            cache_dir = DEFAULT_DATA_DIR / "cache"
        self.cache_dir = Path(cache_dir)
        self.default_ttl = default_ttl

    def _hash_path(self, path: str) -> str:
        """Generate a safe filename from a cache path using SHA-256 hash."""
        return hashlib.sha256(path.encode()).hexdigest()[:16]

    def _entry_path(self, path: str) -> Path:
        return self.cache_dir / f"{self._hash_path(path)}.json"

    def _is_expired(self, entry: dict[str, Any]) -> bool:
        ttl = entry.get("ttl", 0)
        if ttl == 0:
            return False
        cached_at = datetime.fromisoformat(entry["cached_at"])
        age = (datetime.now(UTC) - cached_at).total_seconds()
        return age > ttl

    def _read(self, path: str) -> CachedResponse | None:
        file_path = self._entry_path(path)
        if not file_path.exists():
            return None

        try:
            entry = json.loads(file_path.read_text(encoding="utf-8"))
            response = CachedResponse.model_validate(entry["response"])
            if self._is_expired(entry) or not response.is_fresh():
                logger.debug(f"Cache expired for path={path}")
                file_path.unlink(missing_ok=True)
                return None
            return response
        except (KeyError, TypeError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to read cache entry for {path}: {e}")
            return None

    def _write(self, path: str, response: CachedResponse) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        entry = {
            "cached_at": datetime.now(UTC).isoformat(),
            "path": path,
            "ttl": self.default_ttl,
            "response": response.model_dump(mode="json"),
        }
        file_path = self._entry_path(path)
        atomic_write_text(file_path, json.dumps(entry))
        logger.debug(f"Cached path={path} (ttl={self.default_ttl}s)")

    async def match(self, path: str) -> CachedResponse | None:
        return await asyncio.to_thread(self._read, path)

    async def put(self, path: str, response: CachedResponse) -> None:
        await asyncio.to_thread(self._write, path, response)

    def list_paths(self) -> list[str]:
        """List cached paths that have not expired."""
        paths: list[str] = []
        if not self.cache_dir.exists():
            return paths

        for file_path in self.cache_dir.glob("*.json"):
            try:
                entry = json.loads(file_path.read_text(encoding="utf-8"))
                if not self._is_expired(entry):
                    paths.append(entry.get("path", file_path.stem))
            except (json.JSONDecodeError, KeyError, ValueError):
                continue
        return sorted(paths)
