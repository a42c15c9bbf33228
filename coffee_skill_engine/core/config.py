"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    COUNTER_TABLE_NAME: str = Field(default="coffee_counters")
    LOG_PSEUDONYM_SECRET: str = Field(...)
    COFFEE_SKILL_LOG_LEVEL: str = Field(default="info")
    COFFEE_SKILL_LOG_DIR: Path | None = Field(default=None)
    # Coffees allowed between two cleanings before the machine is due
    CLEANING_THRESHOLD: int = Field(default=40, ge=1)
    DEFAULT_LOCALE: str = Field(default="en-US")
    # Extra increment attempts after losing a concurrent first-create race
    MAX_CREATE_RETRIES: int = Field(default=1, ge=0)
    # When set, envelopes addressed to any other skill are rejected
    SKILL_APPLICATION_ID: str | None = Field(default=None)
    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_HEALTHCHECK_AUTH: bool = Field(default=True)

    DATA_DIR: Path = Field(default=Path("/data"))


settings = Settings()  # type: ignore[call-arg]
config = settings  # Alias used by most call sites


__all__ = ["Settings", "settings", "config"]
