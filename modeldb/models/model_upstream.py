"""Models for the raw upstream feed."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UpstreamEntry(BaseModel):
    """Permissive schema for one upstream model entry.

    Only the provider tag is required. Everything else passes through
    untouched and is interpreted by the record transformer.
    """

    model_config = ConfigDict(extra="allow")

    litellm_provider: str = Field(min_length=1)
    mode: str | None = None

    @field_validator("mode", mode="before")
    @classmethod
    def _ignore_non_string_mode(cls, value: Any) -> str | None:
        return value if isinstance(value, str) and value else None


class UpstreamPayload(BaseModel):
    """A fetched upstream payload with its transport-level change token."""

    source_url: str
    entries: dict[str, Any] = Field(default_factory=dict, description="Raw name -> raw entry")
    etag: str | None = Field(default=None, description="ETag header, if the server sent one")
