from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional

from resource_builder.models.resource import Category
from resource_builder.models.run import RunConfig

EXTENSION_CATEGORIES: Dict[str, Category] = {
    "vyint": Category.INTERFACE,
    "vyi": Category.ICON,
    "vym": Category.MAP,
    "vymac": Category.MACRO,
}

SOUND_EXTENSIONS: FrozenSet[str] = frozenset({"mp3", "wav", "m4a", "ogg", "aac", "flac"})


@dataclass(frozen=True)
class Classification:
    category: Optional[Category]
    skip: bool = False

    @property
    def directory(self) -> Optional[str]:
        return self.category.directory if self.category is not None else None


class ResourceClassifier:
    """Maps a file extension to its resource category.

    Sound files are skipped entirely when the run ignores sound. An
    extension with no category comes back with ``category=None``.
    """

    def classify(self, extension: str, config: RunConfig) -> Classification:
        if extension in EXTENSION_CATEGORIES:
            return Classification(category=EXTENSION_CATEGORIES[extension])

        if extension in SOUND_EXTENSIONS:
            if config.ignore_sound:
                return Classification(category=None, skip=True)
            return Classification(category=Category.SOUND)

        return Classification(category=None)
