from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CatalogSettings(BaseSettings):
    catalog_file: Path | None = Field(
        default=None,
        description="YAML catalog definition; the reference catalog is used when unset",
    )

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
