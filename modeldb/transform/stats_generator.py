"""Catalog statistics over a served model list.

Counts by provider, type, capability and deprecation state. Capability
counts cover the legacy flags plus any discovered flag, so the numbers
follow the upstream schema without code changes.
"""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from typing import Any

from modeldb.models.model_record import CAPABILITY_PREFIX, LEGACY_CAPABILITIES
from modeldb.models.model_stats import CatalogStats, DeprecationStats

logger = logging.getLogger(__name__)


def compute_catalog_stats(
    records: Iterable[Mapping[str, Any]],
    capabilities: Iterable[str] | None = None,
) -> CatalogStats:
    """Compute statistics for a list of published records.

    Args:
        records: Records in their published flat shape.
        capabilities: Capability names to count. Defaults to the legacy flags
            plus every "supports_*" key seen on the records.

    Returns:
        CatalogStats with sorted count mappings.
    """
    records = list(records)

    if capabilities is None:
        names = set(LEGACY_CAPABILITIES)
        for record in records:
            names.update(key for key in record if key.startswith(CAPABILITY_PREFIX))
    else:
        names = set(capabilities) | set(LEGACY_CAPABILITIES)

    providers: Counter[str] = Counter()
    types: Counter[str] = Counter()
    capability_counts: Counter[str] = Counter({name: 0 for name in names})
    deprecated = 0

    for record in records:
        providers[str(record.get("provider_id", "unknown"))] += 1
        types[str(record.get("model_type", "chat"))] += 1
        for name in names:
            if record.get(name) is True:
                capability_counts[name] += 1
        if record.get("deprecation_date"):
            deprecated += 1

    stats = CatalogStats(
        total=len(records),
        providers=dict(sorted(providers.items())),
        types=dict(sorted(types.items())),
        capabilities=dict(sorted(capability_counts.items())),
        deprecation=DeprecationStats(active=len(records) - deprecated, deprecated=deprecated),
    )
    logger.debug(
        f"Computed stats for {stats.total} models across {len(stats.providers)} providers"
    )
    return stats
