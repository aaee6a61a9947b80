"""
Configuration settings for the SOLID Showcase.

Uses Pydantic Settings to load environment variables for logging and
demonstration profiling. Query semantics are never configurable.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Demonstrations
    showcase_profile: bool = Field(False, alias="SHOWCASE_PROFILE")
    showcase_sample_interval_ms: int = Field(50, gt=0, alias="SHOWCASE_SAMPLE_INTERVAL_MS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
