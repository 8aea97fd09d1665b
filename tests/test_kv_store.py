"""Tests for the durable key-value store backends."""

import asyncio
from pathlib import Path

import pytest

from modeldb.storage.permanent_storage.file_store import FileKeyValueStore
from modeldb.storage.permanent_storage.memory_store import MemoryKeyValueStore


@pytest.fixture
def file_store(tmp_path: Path) -> FileKeyValueStore:
    return FileKeyValueStore(kv_dir=tmp_path / "kv")


class TestFileKeyValueStore:
    """Tests for FileKeyValueStore class."""

    @pytest.mark.asyncio
    async def test_put_and_get(self, file_store: FileKeyValueStore) -> None:
        await file_store.put("20250101120000Z:list", "[]")
        assert await file_store.get("20250101120000Z:list") == "[]"

    @pytest.mark.asyncio
    async def test_get_missing(self, file_store: FileKeyValueStore) -> None:
        assert await file_store.get("manifest") is None

    @pytest.mark.asyncio
    async def test_overwrite(self, file_store: FileKeyValueStore) -> None:
        await file_store.put("manifest", '{"latest": "a"}')
        await file_store.put("manifest", '{"latest": "b"}')
        assert await file_store.get("manifest") == '{"latest": "b"}'

    @pytest.mark.asyncio
    async def test_no_temp_files_left(self, file_store: FileKeyValueStore) -> None:
        await file_store.put("manifest", "{}")
        assert list(file_store.kv_dir.glob("*.tmp")) == []

    @pytest.mark.asyncio
    async def test_concurrent_puts_same_key(self, file_store: FileKeyValueStore) -> None:
        values = ["x" * 2_000_000 + str(i) for i in range(8)]

        results = await asyncio.gather(
            *(file_store.put("manifest", value) for value in values),
            return_exceptions=True,
        )

        assert [r for r in results if isinstance(r, Exception)] == []
        assert await file_store.get("manifest") in values
        assert list(file_store.kv_dir.glob("*.tmp")) == []

    @pytest.mark.asyncio
    async def test_truncated_file_reads_as_missing(self, file_store: FileKeyValueStore) -> None:
        await file_store.put("manifest", "{}")
        [path] = file_store.kv_dir.glob("*.json")
        path.write_text("{trunc", encoding="utf-8")

        assert await file_store.get("manifest") is None

    @pytest.mark.asyncio
    async def test_file_without_value_reads_as_missing(self, file_store: FileKeyValueStore) -> None:
        await file_store.put("manifest", "{}")
        [path] = file_store.kv_dir.glob("*.json")
        path.write_text('{"key": "manifest"}', encoding="utf-8")

        assert await file_store.get("manifest") is None

    @pytest.mark.asyncio
    async def test_list_keys_with_prefix(self, file_store: FileKeyValueStore) -> None:
        for key in ("20250101120000Z:list", "20250101120000Z:map", "20250102000000Z:list"):
            await file_store.put(key, "[]")
        await file_store.put("manifest", "{}")

        assert file_store.list_keys("20250101120000Z:") == [
            "20250101120000Z:list",
            "20250101120000Z:map",
        ]
        assert len(file_store.list_keys()) == 4

    @pytest.mark.asyncio
    async def test_persists_across_instances(self, tmp_path: Path) -> None:
        await FileKeyValueStore(tmp_path).put("manifest", "{}")
        assert await FileKeyValueStore(tmp_path).get("manifest") == "{}"


class TestMemoryKeyValueStore:
    """Tests for MemoryKeyValueStore class."""

    @pytest.mark.asyncio
    async def test_counts_reads_and_writes(self) -> None:
        store = MemoryKeyValueStore({"manifest": "{}"})
        await store.get("manifest")
        await store.get("missing")
        await store.put("a:list", "[]")
        assert store.reads == 2
        assert store.writes == 1
        assert len(store) == 2

    def test_list_keys(self) -> None:
        store = MemoryKeyValueStore({"b:list": "[]", "a:list": "[]", "manifest": "{}"})
        assert store.list_keys() == ["a:list", "b:list", "manifest"]
        assert store.list_keys("a:") == ["a:list"]
