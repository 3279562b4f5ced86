"""Pipeline configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PipelineConfig(BaseModel):
    """Global pipeline configuration."""

    # Profile scraper
    scraper_actor_id: str = Field(
        default="apricot_blackberry/tiktok-profile-scraper",
        description="Apify actor that scrapes TikTok profiles",
    )
    scraper_memory_mb: int = Field(default=1024, description="Memory for the scraper run")
    scraper_timeout_secs: int = Field(default=120, description="Scraper run timeout")
    delay_between_requests_ms: int = Field(
        default=1000,
        description="Delay the scraper waits between profiles",
    )

    # Output
    profile_url_template: str = Field(
        default="https://www.tiktok.com/@{username}",
        description="Public profile URL for a username",
    )
    report_findings_limit: int = Field(
        default=2,
        description="Strengths/concerns shown per creator in the console report",
    )

    # Ranking
    ranking_workers: int | None = Field(
        default=None,
        description="Thread pool size for ranking; None scores sequentially",
    )


# Global config instance (can be overridden in tests)
DEFAULT_CONFIG = PipelineConfig()


def get_config() -> PipelineConfig:
    """Get the current pipeline configuration."""
    return DEFAULT_CONFIG
