"""Application configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from medline_loader.constants import DEFAULT_DATABASE_URL, DEFAULT_PROGRESS_EVERY


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Database
    database_url: str = DEFAULT_DATABASE_URL
    echo_sql: bool = False

    # Load run
    progress_every: int = DEFAULT_PROGRESS_EVERY

    # App Settings
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
