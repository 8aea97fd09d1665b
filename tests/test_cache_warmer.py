"""Tests for edge cache warming."""

from unittest.mock import AsyncMock

import pytest

from modeldb.models.model_artifacts import ArtifactKind, ArtifactSet
from modeldb.storage.cache.memory_cache import MemoryEdgeCache
from modeldb.storage.cache_warmer import warm_cache


class TestWarmCache:
    """Tests for warm_cache."""

    @pytest.mark.asyncio
    async def test_writes_all_kinds(
        self, edge_cache: MemoryEdgeCache, artifact_set: ArtifactSet
    ) -> None:
        warmed = await warm_cache(edge_cache, artifact_set)

        assert warmed == list(ArtifactKind)
        response = await edge_cache.match("/cache/v1/latest/metadata.json")
        assert response is not None
        assert response.read_json()["model_count"] == 5
        assert response.headers == {
            "Content-Type": "application/json",
            "Cache-Control": "public, max-age=3600",
        }

    @pytest.mark.asyncio
    async def test_failures_are_skipped(self, artifact_set: ArtifactSet) -> None:
        cache = MemoryEdgeCache()
        original_put = cache.put

        async def put(path, response):
            if path.endswith("map.json"):
                raise ConnectionError("edge unavailable")
            await original_put(path, response)

        cache.put = put
        warmed = await warm_cache(cache, artifact_set)

        assert ArtifactKind.MAP not in warmed
        assert len(warmed) == 3

    @pytest.mark.asyncio
    async def test_never_raises(self, artifact_set: ArtifactSet) -> None:
        cache = AsyncMock()
        cache.put.side_effect = RuntimeError("down")
        assert await warm_cache(cache, artifact_set) == []
