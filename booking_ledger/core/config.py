"""Configuration management with pydantic-settings.

Every setting can be overridden with a BOOKING_LEDGER_* environment variable
or a .env file in the working directory.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable validation."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKING_LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field("Booking Ledger API", description="Service name shown at /")

    # === Logging ===
    log_level: str = Field("INFO", description="Root log level")
    log_format: Literal["console", "json"] = Field("console", description="console or json lines")

    # === Input handling ===
    strict_numeric_input: bool = Field(
        False,
        description="Reject non-representable numbers instead of treating them as 0",
    )

    # === HTTP ===
    host: str = Field("127.0.0.1", description="Bind address for uvicorn")
    port: int = Field(8000, ge=1, le=65535, description="Bind port for uvicorn")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
