"""Artifact set models: the four co-located views of one published version."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from modeldb.consts import EDGE_CACHE_PATH_TEMPLATE, SCHEMA_VERSION, VERSION_KEY_TEMPLATE
from modeldb.models.model_record import ModelRecord


class ArtifactKind(str, Enum):
    """Artifact kinds published for every version."""

    LIST = "list"
    MAP = "map"
    PROVIDERS = "providers"
    METADATA = "metadata"

    @property
    def cache_path(self) -> str:
        """Well-known edge cache path holding the latest artifact of this kind."""
        return EDGE_CACHE_PATH_TEMPLATE.format(kind=self.value)

    def storage_key(self, version: str) -> str:
        """Durable store key for this kind within a version."""
        return VERSION_KEY_TEMPLATE.format(version=version, kind=self.value)


class ArtifactMetadata(BaseModel):
    """Metadata artifact describing one version."""

    model_config = ConfigDict(protected_namespaces=())

    source: str = Field(description="Upstream feed URL")
    generated_at: str = Field(description="ISO-8601 generation timestamp")
    model_count: int = Field(ge=0, description="Number of records in the version")
    schema_version: str = Field(default=SCHEMA_VERSION)
    capabilities: list[str] = Field(
        default_factory=list, description="Capability flags discovered this refresh"
    )
    model_types: list[str] = Field(
        default_factory=list, description="Distinct model types present in the records"
    )


class ArtifactSet(BaseModel):
    """One version's data.

    ``records`` is the single canonical sequence sorted by
    (provider_id, model_id). The list, map and by-provider views are all
    derived from it, so they agree by construction.
    """

    version: str
    etag: str = Field(description="Change token: upstream ETag or content fingerprint")
    metadata: ArtifactMetadata
    records: list[ModelRecord] = Field(default_factory=list)

    def as_list(self) -> list[dict[str, Any]]:
        return [record.to_dict() for record in self.records]

    def as_map(self) -> dict[str, dict[str, Any]]:
        return {record.model_id: record.to_dict() for record in self.records}

    def as_by_provider(self) -> dict[str, list[dict[str, Any]]]:
        grouped: dict[str, list[dict[str, Any]]] = {}
        for record in self.records:
            grouped.setdefault(record.provider_id, []).append(record.to_dict())
        return {provider_id: grouped[provider_id] for provider_id in sorted(grouped)}

    def payload(self, kind: ArtifactKind | str) -> Any:
        """JSON-ready payload for one artifact kind."""
        kind = ArtifactKind(kind)
        if kind == ArtifactKind.LIST:
            return self.as_list()
        if kind == ArtifactKind.MAP:
            return self.as_map()
        if kind == ArtifactKind.PROVIDERS:
            return self.as_by_provider()
        return self.metadata.model_dump(mode="json")

    def payloads(self) -> dict[ArtifactKind, Any]:
        """JSON-ready payloads for all four kinds."""
        return {kind: self.payload(kind) for kind in ArtifactKind}
