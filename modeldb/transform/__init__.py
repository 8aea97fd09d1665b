"""Discovery, record transformation, artifact building and statistics."""

from modeldb.transform.artifact_builder import (
    build_artifact_set,
    build_artifacts,
    content_fingerprint,
    djb2_hash,
    make_version_id,
    stable_stringify,
    validate_entries,
)
from modeldb.transform.discovery import (
    BASE_MODEL_TYPES,
    DiscoveredVocabulary,
    discover_capabilities,
    discover_model_types,
    discover_vocabulary,
)
from modeldb.transform.record_transformer import transform_record
from modeldb.transform.stats_generator import compute_catalog_stats

__all__ = [
    "BASE_MODEL_TYPES",
    "DiscoveredVocabulary",
    "build_artifact_set",
    "build_artifacts",
    "compute_catalog_stats",
    "content_fingerprint",
    "discover_capabilities",
    "discover_model_types",
    "discover_vocabulary",
    "djb2_hash",
    "make_version_id",
    "stable_stringify",
    "transform_record",
    "validate_entries",
]
