from .app_settings import AppSettings
from .catalog_config_loader import CatalogConfigLoader
from .catalog_settings import CatalogSettings
from .main_settings import Settings

__all__ = [
    "AppSettings",
    "CatalogConfigLoader",
    "CatalogSettings",
    "Settings",
]
