"""Versioned artifact persistence and manifest bookkeeping.

State machine: no version (manifest absent or latest is None) ->
has-version(v). Only ``publish`` advances ``latest``, and it writes the
manifest last, after all four artifacts for the new version exist.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from modeldb.consts import MANIFEST_KEY
from modeldb.errors import PublishError
from modeldb.models.common import _utc_now, iso_timestamp
from modeldb.models.model_artifacts import ArtifactKind, ArtifactSet
from modeldb.models.model_manifest import Manifest
from modeldb.storage.permanent_storage.base import KeyValueStore

logger = logging.getLogger(__name__)


class VersionStore:
    """Reads and writes versions and the manifest on a KeyValueStore.

    The manifest update is a non-atomic read-modify-write. Overlapping
    publishers both complete and the later manifest write wins.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def read_manifest(self) -> Manifest | None:
        """Load the manifest.

        Returns:
            Manifest, or None if absent or unreadable.
        """
        raw = await self.store.get(MANIFEST_KEY)
        if raw is None:
            return None
        try:
            return Manifest.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable manifest: {e}")
            return None

    async def write_manifest(self, manifest: Manifest) -> None:
        await self.store.put(MANIFEST_KEY, manifest.model_dump_json())

    async def latest_version(self) -> str | None:
        manifest = await self.read_manifest()
        return manifest.latest if manifest else None

    async def read_artifact_raw(self, version: str, kind: ArtifactKind | str) -> str | None:
        """Serialized artifact for a version, or None if missing."""
        return await self.store.get(ArtifactKind(kind).storage_key(version))

    async def read_artifact(self, version: str, kind: ArtifactKind | str) -> Any | None:
        """Decoded artifact for a version, or None if missing or corrupt."""
        raw = await self.read_artifact_raw(version, kind)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt artifact {ArtifactKind(kind).storage_key(version)}: {e}")
            return None

    async def publish(self, artifacts: ArtifactSet) -> Manifest:
        """Write all four artifacts under a new version, then advance the manifest.

        Args:
            artifacts: Fully built artifact set.

        Returns:
            The manifest as written.

        Raises:
            PublishError: If any artifact write fails. The manifest is left
                untouched, so readers keep serving the previous version.
        """
        version = artifacts.version
        for kind, payload in artifacts.payloads().items():
            key = kind.storage_key(version)
            try:
                await self.store.put(key, json.dumps(payload, ensure_ascii=False))
            except Exception as e:
                raise PublishError(f"Failed to write {key}: {e}", version=version, key=key) from e
            logger.debug(f"Wrote {key}")

        current = await self.read_manifest() or Manifest()
        manifest = current.with_version(artifacts, checked_at=iso_timestamp(_utc_now()))
        try:
            await self.write_manifest(manifest)
        except Exception as e:
            raise PublishError(
                f"Failed to write manifest: {e}", version=version, key=MANIFEST_KEY
            ) from e

        logger.info(
            f"Published version {version} ({artifacts.metadata.model_count} models, "
            f"{len(manifest.versions)} versions total)"
        )
        return manifest

    async def record_check(self, manifest: Manifest | None = None) -> Manifest | None:
        """Stamp ``checked_at`` on an unchanged refresh without touching ``latest``.

        Returns:
            Updated manifest, or None if there is no manifest yet.
        """
        manifest = manifest or await self.read_manifest()
        if manifest is None:
            return None
        updated = manifest.with_check(iso_timestamp(_utc_now()))
        await self.write_manifest(updated)
        return updated
