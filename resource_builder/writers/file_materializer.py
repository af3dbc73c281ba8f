from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from resource_builder.utils.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class CopyResult:
    source: str
    destination: str
    status: str

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class FileMaterializer:
    """Copies a source file into a category directory under a new name."""

    def copy(self, src_path: Path, dest_dir: Path, new_name: str) -> CopyResult:
        destination = Path(dest_dir) / new_name
        try:
            Path(dest_dir).mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src_path, destination)
        except OSError as exc:
            logger.error("[Error] copying %s: %s", src_path, exc)
            return CopyResult(
                source=str(src_path),
                destination=str(destination),
                status=f"error: {exc}",
            )

        return CopyResult(source=str(src_path), destination=str(destination), status="ok")
