"""Configuration management for Folio."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FOLIO_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Content locations
    content_dir: Path = Field(
        default=Path("content"),
        description="Directory holding site.json, experience/, projects/ and blog/",
    )
    output_dir: Path = Field(
        default=Path("site"),
        description="Directory the rendered pages are written to",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
