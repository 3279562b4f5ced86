"""Application settings with Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    app_mode: Literal["development", "production"] = Field(
        default="development",
        alias="APP_MODE",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "silent"] = Field(
        default="INFO",
        alias="LOG_LEVEL",
    )

    # Profile scraper
    apify_token: SecretStr | None = Field(default=None, alias="APIFY_TOKEN")

    # Creator validation limits
    max_followers: int = Field(default=1_000_000_000, gt=0, alias="MAX_FOLLOWERS")
    max_bio_length: int = Field(default=2_000, gt=0, alias="MAX_BIO_LENGTH")

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.app_mode == "production"

    @property
    def min_log_level(self) -> int:
        """Numeric stdlib level for the configured LOG_LEVEL."""
        return _LEVELS[self.log_level]


_LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "silent": 50,
}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
