"""Configuration settings for the spending analytics engine."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

ShareStrategy = Literal["rounded", "largest_remainder"]


class Settings(BaseSettings):
    """Flat settings read from environment variables or a local .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Money display
    currency_code: str = Field(default="SEK", validation_alias="CURRENCY_CODE")
    thousands_separator: str = Field(
        default=" ", validation_alias="THOUSANDS_SEPARATOR"
    )
    decimal_separator: str = Field(default=",", validation_alias="DECIMAL_SEPARATOR")

    # Balance & settlement
    settlement_tolerance_cents: int = Field(
        default=1, ge=0, validation_alias="SETTLEMENT_TOLERANCE_CENTS"
    )
    share_strategy: ShareStrategy = Field(
        default="rounded", validation_alias="SHARE_STRATEGY"
    )

    # Optional override for the packaged fallback palette
    palette_path: str | None = Field(default=None, validation_alias="PALETTE_PATH")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", validation_alias="LOG_LEVEL"
    )
    log_format: Literal["json", "console"] = Field(
        default="console", validation_alias="LOG_FORMAT"
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
