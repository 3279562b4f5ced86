"""Audience size fit against the brand's target tier."""

from __future__ import annotations

from compat_scoring.tiers import classify_tier, tier_distance
from compat_scoring.types import AudienceScore, BrandProfile, CreatorProfile, Tier


def score_audience_fit(creator: CreatorProfile, brand: BrandProfile) -> AudienceScore:
    """Compare the creator's tier with the brand's target tier.

    No target: neutral 70. Exact tier: 95. Adjacent tier: 70. Further: 40.
    """
    tier = classify_tier(creator.followers or 0)

    if brand.target_tier is None:
        return AudienceScore(score=70, message="No specific tier requirement", tier=tier)

    target = Tier(brand.target_tier)
    if tier == target:
        return AudienceScore(
            score=95,
            message=f"Perfect tier match: {tier}",
            tier=tier,
            target_tier=target,
        )

    if tier_distance(tier, target) == 1:
        return AudienceScore(
            score=70,
            message=f"Close tier match: {tier} vs target {target}",
            tier=tier,
            target_tier=target,
        )

    return AudienceScore(
        score=40,
        message=f"Tier mismatch: {tier} vs target {target}",
        tier=tier,
        target_tier=target,
    )
