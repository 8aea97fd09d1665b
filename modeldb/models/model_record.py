"""Canonical model record published in every artifact."""

from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, computed_field

CAPABILITY_PREFIX: Final[str] = "supports_"

# Always present on published records so older consumers get a boolean
LEGACY_CAPABILITIES: Final[tuple[str, ...]] = (
    "supports_function_calling",
    "supports_vision",
    "supports_json_mode",
    "supports_parallel_functions",
)


class ModelRecord(BaseModel):
    """One model in the catalog.

    Capability flags live in ``capabilities`` (discovered per refresh). The
    four legacy flags are computed from that mapping and always serialize
    as booleans. Upstream fields that were not superseded pass through as
    extra attributes.
    """

    model_config = ConfigDict(extra="allow", protected_namespaces=())

    provider_id: str = Field(description="Normalized provider id, e.g. openai")
    provider_name: str = Field(description="Provider display name")
    model_id: str = Field(description="Normalized model id, unique per version")
    model_name: str = Field(description="Model display name")
    max_input_tokens: int | None = None
    max_output_tokens: int | None = None
    input_cost_per_token: float = Field(default=0.0, ge=0.0)
    input_cost_per_million: float = Field(default=0.0, ge=0.0)
    output_cost_per_token: float = Field(default=0.0, ge=0.0)
    output_cost_per_million: float = Field(default=0.0, ge=0.0)
    cache_read_cost_per_token: float | None = Field(default=None, ge=0.0)
    cache_read_cost_per_million: float | None = Field(default=None, ge=0.0)
    cache_write_cost_per_token: float | None = Field(default=None, ge=0.0)
    cache_write_cost_per_million: float | None = Field(default=None, ge=0.0)
    model_type: str = Field(default="chat", description="Normalized model type")
    deprecation_date: str | None = None
    capabilities: dict[str, bool] = Field(default_factory=dict, exclude=True)

    @computed_field
    @property
    def supports_function_calling(self) -> bool:
        return self.capabilities.get("supports_function_calling") is True

    @computed_field
    @property
    def supports_vision(self) -> bool:
        return self.capabilities.get("supports_vision") is True

    @computed_field
    @property
    def supports_json_mode(self) -> bool:
        return self.capabilities.get("supports_json_mode") is True

    @computed_field
    @property
    def supports_parallel_functions(self) -> bool:
        return self.capabilities.get("supports_parallel_functions") is True

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the published flat JSON shape.

        Capability flags are flattened to top-level ``supports_*`` keys.
        """
        data = self.model_dump(mode="json")
        for name in sorted(self.capabilities):
            data[name] = self.capabilities[name]
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModelRecord":
        """Parse a record from its published flat JSON shape."""
        fields: dict[str, Any] = {}
        capabilities: dict[str, bool] = {}
        for key, value in data.items():
            if key.startswith(CAPABILITY_PREFIX):
                if isinstance(value, bool):
                    capabilities[key] = value
                continue
            fields[key] = value
        fields["capabilities"] = capabilities
        return cls.model_validate(fields)
