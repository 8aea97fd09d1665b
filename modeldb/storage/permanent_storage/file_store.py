"""File-based durable key-value store.

One file per key under a single directory. Each write goes to its own
temporary file first and is renamed into place, so readers never observe a
partial value and concurrent writers of one key never collide.
"""

import asyncio
import hashlib
import json
import logging
import os
import tempfile
from datetime import UTC, datetime
from pathlib import Path

from modeldb.consts import DEFAULT_DATA_DIR
from modeldb.storage.permanent_storage.base import KeyValueStore

logger = logging.getLogger(__name__)


def atomic_write_text(path: Path, text: str) -> None:
    """Write ``text`` to ``path`` through a private temp file and ``os.replace``."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f"{path.stem}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except Exception:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class FileKeyValueStore(KeyValueStore):
    """Durable store backed by JSON files.

    Directory structure:
        {kv_dir}/
        ├── {hash}.json    # {"key": ..., "written_at": ..., "value": ...}
        └── {hash}.json

    Keys are hashed for filenames because they contain ":" characters.
    """

    def __init__(self, kv_dir: Path | str | None = None):
        """Initialize FileKeyValueStore.

        Args:
            kv_dir: Directory for value files. Defaults to {DEFAULT_DATA_DIR}/kv.
        """
        if kv_dir is None:
            kv_dir = DEFAULT_DATA_DIR / "kv"
        self.kv_dir = Path(kv_dir)

    def _key_path(self, key: str) -> Path:
        return self.kv_dir / f"{hashlib.sha256(key.encode()).hexdigest()[:24]}.json"

    def _read(self, key: str) -> str | None:
        path = self._key_path(key)
        if not path.exists():
            return None
        try:
            value = json.loads(path.read_text(encoding="utf-8"))["value"]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Unreadable store file for key={key} ({path.name}): {e}")
            return None
        if not isinstance(value, str):
            logger.warning(f"Store file for key={key} holds a non-string value, ignoring")
            return None
        return value

    def _write(self, key: str, value: str) -> None:
        self.kv_dir.mkdir(parents=True, exist_ok=True)
        entry = {
            "key": key,
            "written_at": datetime.now(UTC).isoformat(),
            "value": value,
        }
        path = self._key_path(key)
        atomic_write_text(path, json.dumps(entry))
        logger.debug(f"Stored key={key} at {path.name} ({len(value)} bytes)")

    def list_keys(self, prefix: str = "") -> list[str]:
        """List stored keys starting with ``prefix``, sorted. Inspection helper."""
        keys: list[str] = []
        if not self.kv_dir.exists():
            return keys
        for path in self.kv_dir.glob("*.json"):
            try:
                key = json.loads(path.read_text(encoding="utf-8"))["key"]
            except (ValueError, KeyError, TypeError) as e:
                logger.warning(f"Skipping unreadable store file {path.name}: {e}")
                continue
            if key.startswith(prefix):
                keys.append(key)
        return sorted(keys)

    async def get(self, key: str) -> str | None:
        return await asyncio.to_thread(self._read, key)

    async def put(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._write, key, value)
