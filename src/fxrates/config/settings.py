# src/fxrates/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Values are read from environment variables and an optional .env file.

Files that USE this module:
- fxrates.app (logging setup and CLI defaults)
- fxrates.adapters.providers.ecb (feed URL and HTTP timeout)
- fxrates.application.reader (default base currency)

Files that this module USES:
- fxrates.shared.validators (currency code validation)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations

from typing import Optional  # Type hints for optional values

from pydantic import Field, field_validator  # Data validation and field configuration
from pydantic_settings import BaseSettings, SettingsConfigDict  # Settings management with Pydantic

from fxrates.shared.validators import normalize_currency_code  # Validate 3-letter currency codes

ECB_DAILY_FEED_URL = "http://www.ecb.europa.eu/stats/eurofxref/eurofxref-daily.xml"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # --- Rates ---
    base_currency: str = Field(default="USD", alias="FXRATES_BASE_CURRENCY")
    feed_url: str = Field(default=ECB_DAILY_FEED_URL, alias="FXRATES_FEED_URL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=30, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=120)

    # --- Logging ---
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_console: bool = Field(default=True, alias="FXRATES_LOG_CONSOLE")
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("base_currency")
    @classmethod
    def validate_base_currency(cls, v: str) -> str:
        """Upper-case and validate the base currency code."""
        try:
            return normalize_currency_code(v)
        except ValueError as e:
            raise ValueError(f"Invalid FXRATES_BASE_CURRENCY: {e}") from e

    @field_validator("feed_url")
    @classmethod
    def validate_feed_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("FXRATES_FEED_URL must be an http(s) URL")
        return v


# Global settings instance
settings = Settings()
