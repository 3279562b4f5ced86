"""Engagement rate quality relative to the creator's tier."""

from __future__ import annotations

from compat_scoring.lexicon import ENGAGEMENT_THRESHOLDS
from compat_scoring.tiers import classify_tier
from compat_scoring.types import CreatorProfile, EngagementScore


def score_engagement_quality(creator: CreatorProfile) -> EngagementScore:
    """Grade the engagement rate against the thresholds for the creator's tier."""
    tier = classify_tier(creator.followers or 0)
    rate = float(creator.engagement_rate or 0)
    thresholds = ENGAGEMENT_THRESHOLDS[tier]

    if rate >= thresholds.excellent:
        score, quality = 95, "Excellent"
    elif rate >= thresholds.good:
        score, quality = 75, "Good"
    elif rate >= thresholds.acceptable:
        score, quality = 55, "Acceptable"
    else:
        score, quality = 30, "Below average"

    return EngagementScore(
        score=score,
        message=f"{quality} engagement ({rate:.1f}%) for {tier} tier",
        tier=tier,
        engagement_rate=rate,
    )
