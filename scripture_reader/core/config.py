"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SCRIPTURE_EXECUTION_MODE: Literal["development", "packaged"] = Field(default="development")
    SCRIPTURE_DEV_CONTENT_DIR: Path = Field(default=Path("..") / "public")
    SCRIPTURE_RESOURCE_DIR: Path | None = Field(default=None)
    SCRIPTURE_CONTENT_SUBDIR: str = Field(default="public")

    SCRIPTURE_READER_LOG_LEVEL: str = Field(default="info")
    SCRIPTURE_READER_LOG_DIR: Path | None = Field(default=None)
    DATA_DIR: Path = Field(default=Path("/data"))


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config"]
