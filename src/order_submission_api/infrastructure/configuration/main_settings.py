from pydantic_settings import SettingsConfigDict

from order_submission_api.infrastructure.configuration.app_settings import AppSettings
from order_submission_api.infrastructure.configuration.catalog_settings import CatalogSettings


class Settings(AppSettings, CatalogSettings):
    """
    Combines all settings.
    Usage:
        settings = Settings()
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
