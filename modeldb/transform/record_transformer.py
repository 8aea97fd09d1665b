"""Transform one upstream entry into a canonical ModelRecord.

Pure function of (raw name, entry, vocabulary). Never raises: an entry that
cannot be transformed yields None and is dropped by the caller.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Final

from pydantic import ValidationError

from modeldb.models.model_record import CAPABILITY_PREFIX, LEGACY_CAPABILITIES, ModelRecord
from modeldb.normalization.identifiers import normalize_model_id, normalize_provider_id
from modeldb.normalization.names import generate_display_name, get_provider_display_name
from modeldb.transform.discovery import DiscoveredVocabulary

logger = logging.getLogger(__name__)

PER_MILLION: Final[int] = 1_000_000

# Upstream fields replaced by canonical fields on the record
SUPERSEDED_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "litellm_provider",
        "mode",
        "cache_creation_input_token_cost",
        "cache_read_input_token_cost",
    }
)

# Older upstream flag -> legacy capability it populates
LEGACY_FLAG_SOURCES: Final[tuple[tuple[str, str], ...]] = (
    ("supports_response_schema", "supports_json_mode"),
    ("supports_parallel_function_calling", "supports_parallel_functions"),
)

_CANONICAL_FIELDS: Final[frozenset[str]] = frozenset(ModelRecord.model_fields) | frozenset(
    LEGACY_CAPABILITIES
)


def _as_cost(value: Any) -> float | None:
    """Parse a non-negative finite number. Anything else counts as absent."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    value = float(value)
    if not math.isfinite(value) or value < 0:
        return None
    return value


def _as_token_limit(value: Any) -> int | None:
    """Token limits are positive integers; zero or unparseable means unknown."""
    parsed = _as_cost(value)
    if not parsed:
        return None
    return int(parsed)


def _per_million(per_token: float | None) -> float | None:
    return per_token * PER_MILLION if per_token is not None else None


def _map_capabilities(
    entry: Mapping[str, Any], vocabulary: DiscoveredVocabulary
) -> dict[str, bool]:
    capabilities = {
        name: entry[name]
        for name in sorted(vocabulary.capabilities)
        if isinstance(entry.get(name), bool)
    }
    for source, target in LEGACY_FLAG_SOURCES:
        if isinstance(entry.get(source), bool):
            capabilities[target] = entry[source]
    for name in LEGACY_CAPABILITIES:
        capabilities[name] = capabilities.get(name) is True
    return capabilities


def _passthrough_fields(entry: Mapping[str, Any]) -> dict[str, Any]:
    return {
        key: value
        for key, value in entry.items()
        if isinstance(key, str)
        and key not in SUPERSEDED_FIELDS
        and key not in _CANONICAL_FIELDS
        and not key.startswith(CAPABILITY_PREFIX)
        and not key.startswith("_")
    }


def transform_record(
    raw_name: str,
    entry: Mapping[str, Any],
    vocabulary: DiscoveredVocabulary,
) -> ModelRecord | None:
    """Transform one upstream entry.

    Args:
        raw_name: Upstream key, e.g. "openai/gpt-4".
        entry: Upstream attribute bag. Must carry a string ``litellm_provider``.
        vocabulary: Capabilities and type map discovered for this refresh.

    Returns:
        ModelRecord, or None if the entry lacks a usable provider tag.
    """
    if not isinstance(entry, Mapping):
        return None
    provider = entry.get("litellm_provider")
    if not isinstance(provider, str) or not provider.strip():
        logger.debug(f"Dropping {raw_name}: missing provider tag")
        return None

    provider_id = normalize_provider_id(provider)
    model_id = normalize_model_id(raw_name, provider_id)

    input_cost = _as_cost(entry.get("input_cost_per_token")) or 0.0
    output_cost = _as_cost(entry.get("output_cost_per_token")) or 0.0
    # Zero cache cost is reported as unknown, not free
    cache_read_cost = _as_cost(entry.get("cache_read_input_token_cost")) or None
    cache_write_cost = _as_cost(entry.get("cache_creation_input_token_cost")) or None

    deprecation_date = entry.get("deprecation_date")
    if not isinstance(deprecation_date, str) or not deprecation_date:
        deprecation_date = None

    try:
        return ModelRecord(
            **_passthrough_fields(entry),
            provider_id=provider_id,
            provider_name=get_provider_display_name(provider_id),
            model_id=model_id,
            model_name=generate_display_name(model_id),
            max_input_tokens=_as_token_limit(entry.get("max_input_tokens")),
            max_output_tokens=_as_token_limit(entry.get("max_output_tokens")),
            input_cost_per_token=input_cost,
            input_cost_per_million=input_cost * PER_MILLION,
            output_cost_per_token=output_cost,
            output_cost_per_million=output_cost * PER_MILLION,
            cache_read_cost_per_token=cache_read_cost,
            cache_read_cost_per_million=_per_million(cache_read_cost),
            cache_write_cost_per_token=cache_write_cost,
            cache_write_cost_per_million=_per_million(cache_write_cost),
            model_type=vocabulary.model_type_for(entry.get("mode")),
            deprecation_date=deprecation_date,
            capabilities=_map_capabilities(entry, vocabulary),
        )
    except (ValidationError, TypeError) as e:
        logger.debug(f"Dropping {raw_name}: {e}")
        return None
