from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from resource_builder.models.resource import ResourceManifest
from resource_builder.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class ManifestWriteSummary:
    path: str
    records: int
    status: str

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class ManifestWriter:
    """
    Replaces the manifest file at a fixed path.

    There is no atomic rename: the old file is deleted first, then the new
    one is written. Running it twice leaves the last write in place.
    """

    def finalize(self, manifest: ResourceManifest, output_path: Path) -> ManifestWriteSummary:
        path = Path(output_path)
        self._delete_existing(path)

        payload = manifest.to_payload()
        records = sum(len(v) for v in payload.values())

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            logger.error("[Error] creating resource manifest %s: %s", path, exc)
            return ManifestWriteSummary(path=str(path), records=records, status=f"error: {exc}")

        logger.info("Resource manifest created in %s (%d record(s))", path, records)
        return ManifestWriteSummary(path=str(path), records=records, status="ok")

    @staticmethod
    def _delete_existing(path: Path) -> None:
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.error("[Error] deleting file %s: %s", path, exc)
