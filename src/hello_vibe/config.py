"""Service configuration powered by pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from HELLO_VIBE_* environment variables or `.env`."""

    model_config = SettingsConfigDict(
        env_prefix="HELLO_VIBE_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    title: str = "Hello Vibe API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: Literal["critical", "error", "warning", "info", "debug", "trace"] = "info"


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
