"""Application configuration with environment-based settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "contact-analyzer"
    app_env: Literal["development", "testing", "production"] = "development"
    debug: bool = Field(default=False)
    secret_key: str = Field(default="change-me-in-production")

    # Logging
    log_level: str = Field(default="INFO", description="Minimum log level")
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console output",
    )

    # API
    api_prefix: str = "/api/v1"
    cors_origins: list[str] = Field(
        default=["http://localhost:5173"],
        description="Origins allowed to call the API from a browser",
    )

    # Spreadsheet import/export
    max_upload_rows: int = Field(
        default=50,
        ge=1,
        description="Data rows scanned per uploaded spreadsheet",
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Largest accepted upload body",
    )
    export_filename: str = "contactos_corregidos.xlsx"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def is_testing(self) -> bool:
        return self.app_env == "testing"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
