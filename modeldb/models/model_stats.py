"""Catalog statistics models."""

from pydantic import BaseModel, Field


class DeprecationStats(BaseModel):
    """Active vs deprecated record counts."""

    active: int = Field(ge=0)
    deprecated: int = Field(ge=0)


class CatalogStats(BaseModel):
    """Counts over one version's records.

    Capability counts cover the legacy flags plus every discovered flag,
    so new upstream capabilities show up without a code change.
    """

    total: int = Field(ge=0)
    providers: dict[str, int] = Field(default_factory=dict)
    types: dict[str, int] = Field(default_factory=dict)
    capabilities: dict[str, int] = Field(default_factory=dict)
    deprecation: DeprecationStats
