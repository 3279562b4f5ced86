"""Scoring logic producing output records.

This module handles:
- Scoring creators one by one for a brand
- Ranking creators for a brand
- Shaping results into JSON-ready report records
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Literal

from compat_scoring import (
    BrandProfile,
    CompatibilityResult,
    CreatorProfile,
    RankingResult,
    ValidationLimits,
    rank_creators_for_brand,
    score_brand_compatibility,
)
from compat_utils import StrictModel, get_logger, get_settings
from pydantic import Field

from tasks.config import PipelineConfig, get_config
from tasks.inputs import RunInput

log = get_logger("tasks.evaluate")


class BrandIdentity(StrictModel):
    """Brand fields echoed in every output record."""

    name: str | None
    category: str | None


class ProfileSnapshot(StrictModel):
    """Creator fields echoed next to an individual result."""

    nickname: str | None
    followers: int | None
    engagement_rate: float | None = Field(alias="engagementRate")
    verified: bool | None
    bio_link: str | None = Field(alias="bioLink")


class CreatorReport(StrictModel):
    """Output record for one creator scored individually."""

    username: str | None
    profile_url: str | None = Field(alias="profileUrl")
    brand: BrandIdentity
    profile: ProfileSnapshot
    compatibility: CompatibilityResult
    analyzed_at: str = Field(alias="analyzedAt")


class RankingReport(RankingResult):
    """Output record for a ranking run."""

    type: Literal["ranking"] = "ranking"
    brand_identity: BrandIdentity = Field(alias="brandInfo")
    analyzed_at: str = Field(alias="analyzedAt")


def build_limits() -> ValidationLimits:
    """Validation limits from settings."""
    settings = get_settings()
    return ValidationLimits(
        max_followers=settings.max_followers,
        max_bio_length=settings.max_bio_length,
    )


def score_creators(
    creators: list[CreatorProfile | None],
    brand: BrandProfile,
    *,
    limits: ValidationLimits | None = None,
    config: PipelineConfig | None = None,
) -> list[CreatorReport]:
    """Score each creator for the brand and wrap the results as reports."""
    config = config or get_config()
    limits = limits or build_limits()
    identity = _brand_identity(brand)

    reports: list[CreatorReport] = []
    for creator in creators:
        result = score_brand_compatibility(creator, brand, limits=limits)
        username = creator.username if creator is not None else None
        reports.append(
            CreatorReport(
                username=username,
                profile_url=(
                    config.profile_url_template.format(username=username) if username else None
                ),
                brand=identity,
                profile=_snapshot(creator),
                compatibility=result,
                analyzed_at=_now(),
            )
        )
        log.info(
            "creator_scored",
            username=username,
            score=result.overall_score,
            action=result.recommendation.action,
        )
    return reports


def rank_creators(
    creators: list[CreatorProfile | None],
    brand: BrandProfile,
    *,
    limits: ValidationLimits | None = None,
    config: PipelineConfig | None = None,
) -> RankingReport:
    """Rank the creators for the brand as a single report."""
    config = config or get_config()
    ranking = rank_creators_for_brand(
        creators,
        brand,
        limits=limits or build_limits(),
        max_workers=config.ranking_workers,
    )
    return RankingReport(
        **dict(ranking),
        brand_identity=_brand_identity(brand),
        analyzed_at=_now(),
    )


def run_pipeline(
    run_input: RunInput,
    creators: list[CreatorProfile | None],
    *,
    limits: ValidationLimits | None = None,
    config: PipelineConfig | None = None,
) -> list[CreatorReport] | RankingReport:
    """Rank when rankMode is set and there are several creators, else score each."""
    brand = run_input.brand
    log.info(
        "scoring_started",
        brand=brand.identity,
        category=brand.category,
        target_tier=brand.target_tier or "any",
        creators=len(creators),
        rank_mode=run_input.rank_mode,
    )

    if run_input.rank_mode and len(creators) > 1:
        return rank_creators(creators, brand, limits=limits, config=config)
    return score_creators(creators, brand, limits=limits, config=config)


def _snapshot(creator: CreatorProfile | None) -> ProfileSnapshot:
    if creator is None:
        return ProfileSnapshot(
            nickname=None,
            followers=None,
            engagement_rate=None,
            verified=None,
            bio_link=None,
        )
    return ProfileSnapshot(
        nickname=creator.nickname,
        followers=creator.followers,
        engagement_rate=creator.engagement_rate,
        verified=creator.verified,
        bio_link=creator.bio_link,
    )


def _brand_identity(brand: BrandProfile) -> BrandIdentity:
    return BrandIdentity(name=brand.name, category=brand.category)


def _now() -> str:
    return datetime.now(UTC).isoformat()
