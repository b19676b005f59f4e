"""
Store configuration loaded from environment variables.
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Store settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB
    mongodb_uri: str = Field(default="mongodb://localhost:27017")
    mongodb_database: str = Field(default="linkedin_automation")
    mongodb_timeout_seconds: int = Field(default=10, gt=0)

    # Connection pool
    mongodb_max_pool_size: int = Field(default=50, gt=0)
    mongodb_min_pool_size: int = Field(default=10, ge=0)
    mongodb_max_idle_seconds: int = Field(default=30, gt=0)

    # Re-running against an initialized database is a no-op unless disabled
    schema_exist_ok: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
