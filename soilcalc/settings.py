"""Application settings using pydantic-settings.

Configuration for the API server and CLI lives here; the calculation
engine reads none of it. Values can be overridden via environment
variables prefixed with ``SOILCALC_``.

Example:
    export SOILCALC_PORT=9000
    export SOILCALC_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Soilcalc application settings."""

    model_config = SettingsConfigDict(
        env_prefix="SOILCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "INFO"

    # CORS origins (JSON list in env var)
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://localhost:8000",
    ]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
