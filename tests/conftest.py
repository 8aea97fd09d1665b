"""Pytest configuration and fixtures."""

from datetime import UTC, datetime
from typing import Any

import pytest

from modeldb.models.model_artifacts import ArtifactSet
from modeldb.models.model_upstream import UpstreamPayload
from modeldb.storage.cache.memory_cache import MemoryEdgeCache
from modeldb.storage.permanent_storage.memory_store import MemoryKeyValueStore
from modeldb.storage.version_store import VersionStore
from modeldb.transform.artifact_builder import build_artifact_set

SOURCE_URL = "https://example.test/model_prices.json"


@pytest.fixture
def upstream_entries() -> dict[str, Any]:
    """A small upstream feed covering several providers and edge cases."""
    return {
        "sample_spec": {
            "litellm_provider": "one of https://docs.litellm.ai/docs/providers",
            "mode": "one of chat, embedding, completion",
            "supports_vision": True,
        },
        "gpt-4": {
            "litellm_provider": "openai",
            "mode": "chat",
            "input_cost_per_token": 0.00003,
            "output_cost_per_token": 0.00006,
            "max_input_tokens": 8192,
            "max_output_tokens": 4096,
            "max_tokens": 4096,
            "supports_function_calling": True,
        },
        "gpt-4o": {
            "litellm_provider": "openai",
            "mode": "chat",
            "input_cost_per_token": 0.0000025,
            "output_cost_per_token": 0.00001,
            "cache_read_input_token_cost": 0.00000125,
            "max_input_tokens": 128000,
            "max_output_tokens": 16384,
            "supports_function_calling": True,
            "supports_vision": True,
            "supports_response_schema": True,
            "supports_parallel_function_calling": True,
            "supports_prompt_caching": True,
        },
        "claude-3-5-sonnet-latest": {
            "litellm_provider": "anthropic",
            "mode": "chat",
            "input_cost_per_token": 0.000003,
            "output_cost_per_token": 0.000015,
            "cache_creation_input_token_cost": 0.00000375,
            "cache_read_input_token_cost": 0.0000003,
            "max_input_tokens": 200000,
            "max_output_tokens": 8192,
            "deprecation_date": "2025-06-01",
            "supports_function_calling": True,
            "supports_vision": True,
        },
        "gemini/gemini-1.5-pro": {
            "litellm_provider": "gemini",
            "mode": "chat",
            "input_cost_per_token": 0.00000125,
            "output_cost_per_token": 0.000005,
            "max_input_tokens": 2097152,
            "max_output_tokens": 8192,
        },
        "text-embedding-3-small": {
            "litellm_provider": "openai",
            "mode": "embedding",
            "input_cost_per_token": 0.00000002,
            "output_cost_per_token": 0.0,
            "max_input_tokens": 8191,
        },
        "no-provider-model": {
            "mode": "chat",
            "input_cost_per_token": 0.000001,
        },
    }


@pytest.fixture
def upstream_payload(upstream_entries: dict[str, Any]) -> UpstreamPayload:
    return UpstreamPayload(source_url=SOURCE_URL, entries=upstream_entries, etag='W/"etag-1"')


@pytest.fixture
def generated_at() -> datetime:
    return datetime(2025, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def artifact_set(upstream_payload: UpstreamPayload, generated_at: datetime) -> ArtifactSet:
    """Artifacts built from the sample feed."""
    return build_artifact_set(upstream_payload, generated_at=generated_at)


@pytest.fixture
def kv_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def version_store(kv_store: MemoryKeyValueStore) -> VersionStore:
    return VersionStore(kv_store)


@pytest.fixture
def edge_cache() -> MemoryEdgeCache:
    return MemoryEdgeCache()
