"""Follower-count tier classification shared by the engagement and audience scorers."""

from __future__ import annotations

from typing import Final

from compat_scoring.types import Tier

TIER_ORDER: Final[tuple[Tier, ...]] = (
    Tier.NANO,
    Tier.MICRO,
    Tier.MID_TIER,
    Tier.MACRO,
    Tier.MEGA,
)

# Exclusive upper bound of each tier; anything above the last is mega.
TIER_BREAKPOINTS: Final[tuple[tuple[int, Tier], ...]] = (
    (10_000, Tier.NANO),
    (100_000, Tier.MICRO),
    (500_000, Tier.MID_TIER),
    (1_000_000, Tier.MACRO),
)


def classify_tier(followers: int) -> Tier:
    """Map a follower count to its tier."""
    for upper_bound, tier in TIER_BREAKPOINTS:
        if followers < upper_bound:
            return tier
    return Tier.MEGA


def tier_distance(first: Tier | str, second: Tier | str) -> int:
    """Number of steps between two tiers on the ordered scale."""
    return abs(TIER_ORDER.index(Tier(first)) - TIER_ORDER.index(Tier(second)))
