"""Bundled fallback snapshot shipped inside the package.

Served only when neither the edge cache nor the durable store can answer.
Never refreshed at runtime; regenerate with ``modeldb snapshot``.
"""

import json
import logging
from pathlib import Path
from typing import Any

from modeldb.consts import BUNDLED_DATA_DIR
from modeldb.models.model_artifacts import ArtifactKind

logger = logging.getLogger(__name__)


class BundledSnapshot:
    """Lazily loaded, in-memory copy of the bundled artifact files."""

    def __init__(self, data_dir: Path | str = BUNDLED_DATA_DIR):
        self.data_dir = Path(data_dir)
        self._loaded: dict[ArtifactKind, Any] = {}

    def path_for(self, kind: ArtifactKind | str) -> Path:
        return self.data_dir / f"{ArtifactKind(kind).value}.json"

    def get(self, kind: ArtifactKind | str) -> Any:
        """Return the bundled artifact.

        Raises:
            FileNotFoundError: If the snapshot file is missing from the package.
        """
        kind = ArtifactKind(kind)
        if kind not in self._loaded:
            path = self.path_for(kind)
            self._loaded[kind] = json.loads(path.read_text(encoding="utf-8"))
            logger.debug(f"Loaded bundled {kind.value} snapshot from {path}")
        return self._loaded[kind]


def export_snapshot(payloads: dict[ArtifactKind, Any], output_dir: Path | str) -> list[Path]:
    """Write artifact payloads as the bundled snapshot files.

    Args:
        payloads: JSON-ready payload per kind (see ArtifactSet.payloads()).
        output_dir: Destination directory, usually the package data dir.

    Returns:
        Paths written.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for kind, payload in payloads.items():
        path = output_dir / f"{ArtifactKind(kind).value}.json"
        path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        written.append(path)
        logger.info(f"Wrote bundled snapshot: {path}")
    return written
