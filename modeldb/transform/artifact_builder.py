"""Artifact builder: fetch, validate, discover, transform, sort, index.

Produces one ArtifactSet whose list, map and by-provider views are all
derived from a single sorted record sequence.
"""

import json
import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from pydantic import ValidationError

from modeldb.consts import LITELLM_MODEL_URL, SCHEMA_VERSION, UPSTREAM_SENTINEL_KEY
from modeldb.models.common import _utc_now, iso_timestamp
from modeldb.models.model_artifacts import ArtifactMetadata, ArtifactSet
from modeldb.models.model_record import LEGACY_CAPABILITIES, ModelRecord
from modeldb.models.model_upstream import UpstreamEntry, UpstreamPayload
from modeldb.sources.upstream_feed import UpstreamFeed
from modeldb.transform.discovery import discover_vocabulary
from modeldb.transform.record_transformer import transform_record

logger = logging.getLogger(__name__)

VERSION_FORMAT = "%Y%m%d%H%M%SZ"


def stable_stringify(value: Any) -> str:
    """Serialize JSON with sorted keys and no whitespace."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def djb2_hash(text: str) -> str:
    """32-bit djb2 (xor variant) as lowercase hex."""
    value = 5381
    for char in text:
        value = ((value * 33) ^ ord(char)) & 0xFFFFFFFF
    return format(value, "x")


def content_fingerprint(entries: dict[str, Any]) -> str:
    """Deterministic change token for a payload without a server ETag."""
    return djb2_hash(stable_stringify(entries))


def make_version_id(generated_at: datetime, previous: str | None = None) -> str:
    """Derive a compact sortable version id, e.g. 20250101120000Z.

    If the timestamp-derived id would not sort after ``previous`` (same
    second, or clock skew), the id is bumped to one second after it.

    Args:
        generated_at: Generation timestamp.
        previous: Current latest version id, if any.

    Returns:
        Version id strictly greater than ``previous``.
    """
    candidate = generated_at.astimezone(UTC).strftime(VERSION_FORMAT)
    if previous is None or candidate > previous:
        return candidate

    try:
        last = datetime.strptime(previous, VERSION_FORMAT).replace(tzinfo=UTC)
    except ValueError:
        logger.warning(f"Unparseable previous version id {previous!r}, keeping {candidate}")
        return candidate
    bumped = (last + timedelta(seconds=1)).strftime(VERSION_FORMAT)
    logger.info(f"Version {candidate} does not follow {previous}, using {bumped}")
    return bumped


def validate_entries(entries: dict[str, Any]) -> dict[str, dict[str, Any]]:
    """Keep entries matching the permissive upstream schema, in upstream order."""
    valid: dict[str, dict[str, Any]] = {}
    for name, raw in entries.items():
        if name == UPSTREAM_SENTINEL_KEY:
            continue
        try:
            valid[name] = UpstreamEntry.model_validate(raw).model_dump()
        except ValidationError:
            logger.debug(f"Dropping invalid upstream entry: {name}")
    return valid


def _sort_key(record: ModelRecord) -> tuple[str, str]:
    return (record.provider_id, record.model_id)


def build_artifact_set(
    payload: UpstreamPayload,
    generated_at: datetime | None = None,
    previous_version: str | None = None,
) -> ArtifactSet:
    """Build a complete ArtifactSet from a fetched payload.

    Args:
        payload: Fetched upstream payload.
        generated_at: Generation timestamp. Defaults to now.
        previous_version: Current latest version id, used to keep ids monotonic.

    Returns:
        ArtifactSet with records sorted by (provider_id, model_id).
    """
    generated_at = generated_at or _utc_now()
    entries = {k: v for k, v in payload.entries.items() if k != UPSTREAM_SENTINEL_KEY}

    valid = validate_entries(entries)
    dropped = len(entries) - len(valid)
    logger.info(f"Validated {len(valid)} upstream entries ({dropped} dropped)")

    vocabulary = discover_vocabulary(valid.values())

    # Last write wins on duplicate model ids, following upstream key order
    transformed: dict[str, ModelRecord] = {}
    for name, entry in valid.items():
        record = transform_record(name, entry, vocabulary)
        if record is None:
            continue
        if record.model_id in transformed:
            logger.debug(f"Duplicate model_id {record.model_id} from {name}, overwriting")
        transformed[record.model_id] = record

    records = sorted(transformed.values(), key=_sort_key)
    etag = payload.etag or content_fingerprint(entries)

    metadata = ArtifactMetadata(
        source=payload.source_url,
        generated_at=iso_timestamp(generated_at),
        model_count=len(records),
        schema_version=SCHEMA_VERSION,
        capabilities=sorted(vocabulary.capabilities | set(LEGACY_CAPABILITIES)),
        model_types=sorted({record.model_type for record in records}),
    )
    artifacts = ArtifactSet(
        version=make_version_id(generated_at, previous_version),
        etag=etag,
        metadata=metadata,
        records=records,
    )
    logger.info(f"Built version {artifacts.version} with {len(records)} models (etag={etag})")
    return artifacts


async def build_artifacts(
    source_url: str = LITELLM_MODEL_URL,
    feed: UpstreamFeed | None = None,
    previous_version: str | None = None,
) -> ArtifactSet:
    """Fetch the upstream feed and build an ArtifactSet.

    Args:
        source_url: Upstream URL. Ignored when ``feed`` is given.
        feed: Feed client to use. A temporary one is created if None.
        previous_version: Current latest version id.

    Returns:
        Built ArtifactSet.

    Raises:
        UpstreamError: If the fetch or parse fails. Nothing is built.
    """
    if feed is not None:
        payload = await feed.fetch()
    else:
        async with UpstreamFeed(source_url=source_url) as owned_feed:
            payload = await owned_feed.fetch()
    return build_artifact_set(payload, previous_version=previous_version)
