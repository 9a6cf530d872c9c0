"""
Application configuration settings.

Centralized configuration using Pydantic Settings for type safety and validation.
Values are read from environment variables (or a .env file), case-insensitively.
"""

from functools import lru_cache

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
    app_name: str = "accounts"
    log_level: str = "INFO"

    # Verification
    verification_code_ttl_seconds: int = Field(default=300, gt=0)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
