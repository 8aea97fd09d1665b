"""Manifest model: the durable pointer to the latest published version."""

from pydantic import BaseModel, ConfigDict, Field

from modeldb.models.model_artifacts import ArtifactSet


class VersionEntry(BaseModel):
    """One entry in the manifest's append-only version log."""

    model_config = ConfigDict(protected_namespaces=())

    id: str
    generated_at: str
    etag: str | None = None
    model_count: int = Field(ge=0)


class Manifest(BaseModel):
    """Process-wide pointer record stored under the fixed manifest key.

    ``latest`` is the single source of truth for what the read path serves.
    """

    latest: str | None = None
    etag: str | None = None
    checked_at: str | None = None
    versions: list[VersionEntry] = Field(default_factory=list)

    def with_version(self, artifacts: ArtifactSet, checked_at: str) -> "Manifest":
        """Return a copy advanced to a freshly published version."""
        entry = VersionEntry(
            id=artifacts.version,
            generated_at=artifacts.metadata.generated_at,
            etag=artifacts.etag,
            model_count=artifacts.metadata.model_count,
        )
        return Manifest(
            latest=artifacts.version,
            etag=artifacts.etag,
            checked_at=checked_at,
            versions=[*self.versions, entry],
        )

    def with_check(self, checked_at: str) -> "Manifest":
        """Return a copy with only the last-checked timestamp updated."""
        return self.model_copy(update={"checked_at": checked_at})
