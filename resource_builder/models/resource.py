from __future__ import annotations

import threading
from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


class Category(str, Enum):
    INTERFACE = "interface"
    ICON = "icon"
    MAP = "map"
    MACRO = "macro"
    SOUND = "sound"

    @property
    def directory(self) -> str:
        """Name of the output subdirectory under ``resources/``."""
        return self.value


class ResourceRecord(BaseModel):
    """One manifest entry: generated identifier -> original file name."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    resource_identifier: str = Field(alias="resourceIdentifier")
    file_name: str = Field(alias="fileName")


class ResourceManifest(BaseModel):
    """Per-category records, in the order they were appended."""

    interface: List[ResourceRecord] = []
    icon: List[ResourceRecord] = []
    map: List[ResourceRecord] = []
    macro: List[ResourceRecord] = []
    sound: List[ResourceRecord] = []

    _lock: Any = PrivateAttr(default_factory=threading.Lock)

    def append(self, category: Category, record: ResourceRecord) -> None:
        with self._lock:
            getattr(self, Category(category).value).append(record)

    def records(self, category: Category) -> List[ResourceRecord]:
        with self._lock:
            return list(getattr(self, Category(category).value))

    def count(self) -> int:
        with self._lock:
            return sum(len(getattr(self, c.value)) for c in Category)

    def to_payload(self) -> Dict[str, Any]:
        with self._lock:
            return {
                c.value: [r.model_dump(by_alias=True) for r in getattr(self, c.value)]
                for c in Category
            }
