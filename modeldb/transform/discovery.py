"""Capability and model-type discovery over one upstream payload.

The upstream schema evolves on its own schedule. Scanning every entry once
per refresh keeps the capability flags and type vocabulary in step with
whatever the feed currently contains.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Final

from modeldb.models.model_record import CAPABILITY_PREFIX

logger = logging.getLogger(__name__)

DEFAULT_MODEL_TYPE: Final[str] = "chat"

# Upstream mode -> normalized model type
BASE_MODEL_TYPES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "chat": "chat",
        "completion": "completion",
        "embedding": "embedding",
        "image_generation": "image",
        "audio_transcription": "audio",
        "audio_speech": "audio",
        "moderation": "moderation",
        "rerank": "rerank",
    }
)


@dataclass(frozen=True)
class DiscoveredVocabulary:
    """Refresh-scoped vocabulary passed explicitly into the transformer.

    Attributes:
        capabilities: Every "supports_*" key with a boolean value on at least one entry.
        model_types: Upstream mode -> normalized type, base mapping plus identity
            entries for unrecognized modes.
    """

    capabilities: frozenset[str] = frozenset()
    model_types: Mapping[str, str] = field(default_factory=lambda: BASE_MODEL_TYPES)

    def model_type_for(self, mode: Any) -> str:
        """Map an upstream mode to a model type, defaulting to chat."""
        if not isinstance(mode, str) or not mode:
            return DEFAULT_MODEL_TYPE
        return self.model_types.get(mode, DEFAULT_MODEL_TYPE)


def discover_capabilities(entries: Iterable[Mapping[str, Any]]) -> frozenset[str]:
    """Collect capability flag names present as booleans on any entry."""
    capabilities: set[str] = set()
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        for key, value in entry.items():
            if key.startswith(CAPABILITY_PREFIX) and isinstance(value, bool):
                capabilities.add(key)
    return frozenset(capabilities)


def discover_model_types(entries: Iterable[Mapping[str, Any]]) -> Mapping[str, str]:
    """Build the mode -> type map, adding identity entries for unseen modes."""
    model_types = dict(BASE_MODEL_TYPES)
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        mode = entry.get("mode")
        if isinstance(mode, str) and mode and mode not in model_types:
            logger.debug(f"Discovered new model type: {mode}")
            model_types[mode] = mode
    return MappingProxyType(model_types)


def discover_vocabulary(entries: Iterable[Mapping[str, Any]]) -> DiscoveredVocabulary:
    """Run both discoveries over the same entries.

    Args:
        entries: Validated upstream entries for one refresh.

    Returns:
        Immutable vocabulary for this refresh.
    """
    entries = list(entries)
    vocabulary = DiscoveredVocabulary(
        capabilities=discover_capabilities(entries),
        model_types=discover_model_types(entries),
    )
    logger.info(
        f"Discovered {len(vocabulary.capabilities)} capabilities and "
        f"{len(vocabulary.model_types)} model types"
    )
    return vocabulary
