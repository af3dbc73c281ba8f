from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    environment: str = "dev"

    # Output layout
    resources_dir_name: str = "resources"
    manifest_name: str = "resource.json"

    # Processing
    max_workers: int = 8
    identifier_length: int = 8
    extension_match: Literal["exact", "contains"] = "exact"

    class Config:
        env_prefix = "RESOURCE_BUILDER_"
        env_file = ".env"
