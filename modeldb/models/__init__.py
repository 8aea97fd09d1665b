"""Pydantic models for the model catalog."""

from modeldb.models.model_artifacts import ArtifactKind, ArtifactMetadata, ArtifactSet
from modeldb.models.model_cache import CachedResponse
from modeldb.models.model_manifest import Manifest, VersionEntry
from modeldb.models.model_record import CAPABILITY_PREFIX, LEGACY_CAPABILITIES, ModelRecord
from modeldb.models.model_refresh import RefreshResult, RefreshStatus
from modeldb.models.model_stats import CatalogStats, DeprecationStats
from modeldb.models.model_upstream import UpstreamEntry, UpstreamPayload

__all__ = [
    "ArtifactKind",
    "ArtifactMetadata",
    "ArtifactSet",
    "CAPABILITY_PREFIX",
    "CachedResponse",
    "CatalogStats",
    "DeprecationStats",
    "LEGACY_CAPABILITIES",
    "Manifest",
    "ModelRecord",
    "RefreshResult",
    "RefreshStatus",
    "UpstreamEntry",
    "UpstreamPayload",
    "VersionEntry",
]
