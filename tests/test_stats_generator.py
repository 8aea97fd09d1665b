"""Tests for catalog statistics."""

from modeldb.models.model_artifacts import ArtifactSet
from modeldb.transform.stats_generator import compute_catalog_stats


class TestComputeCatalogStats:
    """Tests for compute_catalog_stats."""

    def test_counts(self, artifact_set: ArtifactSet) -> None:
        stats = compute_catalog_stats(artifact_set.as_list())

        assert stats.total == 5
        assert stats.providers == {"anthropic": 1, "google": 1, "openai": 3}
        assert stats.types == {"chat": 4, "embedding": 1}
        assert stats.deprecation.deprecated == 1
        assert stats.deprecation.active == 4

    def test_capability_counts(self, artifact_set: ArtifactSet) -> None:
        stats = compute_catalog_stats(artifact_set.as_list())

        assert stats.capabilities["supports_function_calling"] == 3
        assert stats.capabilities["supports_vision"] == 2
        assert stats.capabilities["supports_json_mode"] == 1
        assert stats.capabilities["supports_prompt_caching"] == 1
        assert list(stats.capabilities) == sorted(stats.capabilities)

    def test_explicit_capabilities_include_legacy(self) -> None:
        records = [{"provider_id": "openai", "model_type": "chat", "supports_audio_input": True}]
        stats = compute_catalog_stats(records, ["supports_audio_input"])

        assert stats.capabilities["supports_audio_input"] == 1
        assert stats.capabilities["supports_vision"] == 0

    def test_empty(self) -> None:
        stats = compute_catalog_stats([])
        assert stats.total == 0
        assert stats.providers == {}
        assert stats.deprecation.active == 0
        assert set(stats.capabilities) == {
            "supports_function_calling",
            "supports_vision",
            "supports_json_mode",
            "supports_parallel_functions",
        }
