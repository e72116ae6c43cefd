"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from art_gallery.app_logging import DEFAULT_LOG_FORMAT

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    harvard_api_key: str | None = None
    harvard_base_url: str = "https://api.harvardartmuseums.org"
    museum_page: int = 1
    museum_page_size: int = 20
    museum_timeout_seconds: float = 15
    museum_retry_attempts: int = 0
    storage_backend: str = "file"
    storage_dir: str = ".art_gallery"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    log_level: str = "INFO"
    log_format: str = DEFAULT_LOG_FORMAT
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
