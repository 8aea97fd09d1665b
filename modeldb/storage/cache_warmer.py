"""Copy the latest artifacts into the edge cache under well-known paths."""

import logging

from modeldb.models.model_artifacts import ArtifactKind, ArtifactSet
from modeldb.models.model_cache import CachedResponse
from modeldb.storage.cache.base import EdgeCache

logger = logging.getLogger(__name__)


async def warm_cache(cache: EdgeCache, artifacts: ArtifactSet) -> list[ArtifactKind]:
    """Write each artifact kind to its well-known edge cache path.

    Never raises. A failed write is logged and skipped; the read path
    recovers by falling through to the durable store.

    Args:
        cache: Edge cache to warm.
        artifacts: Freshly published artifact set.

    Returns:
        Kinds that were written successfully.
    """
    warmed: list[ArtifactKind] = []
    for kind, payload in artifacts.payloads().items():
        try:
            await cache.put(kind.cache_path, CachedResponse.from_payload(payload))
            warmed.append(kind)
        except Exception as e:
            logger.warning(f"Failed to warm {kind.cache_path}: {e}")

    logger.info(f"Warmed {len(warmed)}/{len(ArtifactKind)} edge cache entries for {artifacts.version}")
    return warmed
