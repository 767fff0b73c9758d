from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    # App Config
    app_name: str = "Order Submission API"
    env: str = Field(default="local", alias="APP_ENV")
    log_level: str = "INFO"
    log_format: str = Field(default="", description="json|console; empty selects by environment")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Tracing
    tracing_console_export: bool = False

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)
