from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from resource_builder.config import Settings


class RunConfig(BaseModel):
    """Validated, immutable configuration for one build run."""

    model_config = ConfigDict(frozen=True)

    input_root: Optional[Path] = None
    output_root: Optional[Path] = None
    ignore_sound: bool = False
    verbose: bool = False

    max_workers: int = Field(default=8, ge=1)
    identifier_length: int = Field(default=8, ge=1)
    extension_match: Literal["exact", "contains"] = "exact"
    resources_dir_name: str = "resources"
    manifest_name: str = "resource.json"

    @field_validator("input_root", "output_root", mode="before")
    @classmethod
    def _blank_root_is_missing(cls, value):
        # Path("") would become Path("."), the current directory.
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_settings(cls, settings: Settings, **overrides) -> "RunConfig":
        values = {
            "max_workers": settings.max_workers,
            "identifier_length": settings.identifier_length,
            "extension_match": settings.extension_match,
            "resources_dir_name": settings.resources_dir_name,
            "manifest_name": settings.manifest_name,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    @property
    def resources_root(self) -> Path:
        return Path(self.output_root) / self.resources_dir_name

    @property
    def manifest_path(self) -> Path:
        return Path(self.output_root) / self.manifest_name
