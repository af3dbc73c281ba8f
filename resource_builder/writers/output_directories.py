from __future__ import annotations

import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple

from resource_builder.models.resource import Category
from resource_builder.utils.logging_utils import get_logger

logger = get_logger(__name__)

# "macros" is the directory name older builds used for the macro category.
LEGACY_DIRECTORY_NAMES: Tuple[str, ...] = ("macros",)

CATEGORY_DIRECTORY_NAMES: Tuple[str, ...] = tuple(c.directory for c in Category) + LEGACY_DIRECTORY_NAMES


@dataclass
class ClearSummary:
    removed: List[str] = field(default_factory=list)
    errors: List[Tuple[str, str]] = field(default_factory=list)


class OutputDirectoryManager:
    """Removes per-category output directories left over from a previous run."""

    def clear(
        self,
        base_dir: Path,
        category_dir_names: Iterable[str] = CATEGORY_DIRECTORY_NAMES,
    ) -> ClearSummary:
        summary = ClearSummary()
        for name in category_dir_names:
            directory = Path(base_dir) / name
            if not directory.is_dir():
                continue
            try:
                shutil.rmtree(directory)
                summary.removed.append(str(directory))
                logger.debug("Cleared %s", directory)
            except OSError as exc:
                logger.error("[Error] clearing directory %s: %s", directory, exc)
                summary.errors.append((str(directory), str(exc)))
        return summary
