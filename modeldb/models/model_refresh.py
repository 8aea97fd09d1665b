"""Refresh outcome models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RefreshStatus(str, Enum):
    """Outcome of one refresh run."""

    UPDATED = "updated"
    UNCHANGED = "unchanged"


class RefreshResult(BaseModel):
    """What a refresh run did, reported to the scheduler or trigger caller."""

    model_config = ConfigDict(protected_namespaces=())

    status: RefreshStatus
    version: str | None = Field(default=None, description="Latest version after the run")
    etag: str | None = None
    model_count: int | None = None
    checked_at: str
    forced: bool = False
