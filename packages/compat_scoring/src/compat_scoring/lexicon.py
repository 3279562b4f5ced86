"""Static lookup tables: niches, brand categories, safety keywords, thresholds.

All tables are read-only mappings built once at import time.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final, NamedTuple

from compat_scoring.types import Tier

# Brand category -> niches a creator may cover to be a fit.
BRAND_NICHE_MAP: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    # Tech & Software
    "technology": ("tech", "gaming", "education", "business", "science"),
    "software": ("tech", "business", "education", "productivity"),
    "gaming": ("gaming", "tech", "entertainment", "esports"),
    # Consumer Products
    "fashion": ("fashion", "beauty", "lifestyle", "luxury"),
    "beauty": ("beauty", "fashion", "lifestyle", "skincare", "wellness"),
    "fitness": ("fitness", "health", "sports", "wellness", "nutrition"),
    "food": ("food", "cooking", "lifestyle", "health", "family"),
    "pets": ("pets", "family", "lifestyle"),
    # Finance & Business
    "finance": ("finance", "business", "investing", "crypto", "education"),
    "crypto": ("crypto", "finance", "tech", "investing"),
    "business": ("business", "finance", "entrepreneurship", "education"),
    # Entertainment
    "entertainment": ("entertainment", "comedy", "music", "film", "pop culture"),
    "music": ("music", "entertainment", "lifestyle", "dance"),
    "film": ("film", "entertainment", "pop culture", "reviews"),
    # Lifestyle
    "travel": ("travel", "lifestyle", "adventure", "photography"),
    "home": ("home", "diy", "lifestyle", "family", "interior design"),
    "automotive": ("automotive", "cars", "tech", "lifestyle", "luxury"),
    "sports": ("sports", "fitness", "health", "lifestyle"),
    # Services
    "education": ("education", "learning", "career", "business", "tech"),
    "health": ("health", "wellness", "fitness", "mental health", "nutrition"),
    "dating": ("lifestyle", "relationships", "entertainment", "comedy"),
})

# Creator niche -> keywords detected in bio/nickname (word-boundary matched).
NICHE_KEYWORDS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType({
    "tech": ("tech", "technology", "software", "app", "apps", "gadget", "gadgets",
             "phone", "computer", "coding", "developer"),
    "gaming": ("gaming", "gamer", "game", "games", "esports", "twitch", "streamer"),
    "fashion": ("fashion", "style", "outfit", "ootd", "clothing", "designer"),
    "beauty": ("beauty", "makeup", "skincare", "cosmetic", "cosmetics", "glam"),
    "fitness": ("fitness", "gym", "workout", "training", "muscle", "bodybuilding"),
    "food": ("food", "cooking", "recipe", "recipes", "chef", "foodie", "restaurant"),
    "travel": ("travel", "wanderlust", "adventure", "explore", "backpack"),
    "comedy": ("comedy", "funny", "humor", "jokes", "comedian"),
    "music": ("music", "singer", "musician", "artist", "producer", "dj"),
    "dance": ("dance", "dancer", "choreography", "dancing"),
    "education": ("education", "teacher", "learn", "tutorial", "how to"),
    "business": ("business", "entrepreneur", "startup", "ceo", "founder"),
    "finance": ("finance", "money", "investing", "stocks", "crypto", "wealth"),
    "lifestyle": ("lifestyle", "life", "daily", "vlog", "day in"),
    "family": ("family", "mom", "dad", "parent", "kids", "baby"),
    "pets": ("pets", "dog", "cat", "puppy", "kitten", "animal"),
    "health": ("health", "healthy", "wellness", "nutrition", "mental health"),
    "sports": ("sports", "athlete", "football", "soccer", "basketball"),
    "photography": ("photography", "photographer", "photos"),
    "automotive": ("automotive", "cars", "supercar", "mechanic"),
    "film": ("film", "movie", "movies", "cinema", "filmmaker"),
})

# Marker niche recorded for platform-verified creators.
VERIFIED_NICHE: Final = "verified creator"

HIGH_RISK_KEYWORDS: Final[tuple[str, ...]] = (
    "controversy", "scandal", "lawsuit", "banned", "suspended",
    "hate", "racist", "violent", "explicit", "nsfw",
    "scam", "fraud", "onlyfans",
)

MEDIUM_RISK_KEYWORDS: Final[tuple[str, ...]] = (
    "politics", "political", "controversial", "drama", "beef",
    "gambling", "alcohol", "cbd", "vape",
    "betting", "casino", "cannabis", "tobacco",
)

# Prior sponsorship mentions; reported, never deducted.
LOW_RISK_KEYWORDS: Final[tuple[str, ...]] = (
    "sponsored", "ad", "paid", "promo", "partner", "collab",
)


class EngagementThresholds(NamedTuple):
    """Minimum engagement rate (percent) for each quality level."""

    excellent: float
    good: float
    acceptable: float


# Stricter for small tiers: engagement naturally falls as audiences grow.
ENGAGEMENT_THRESHOLDS: Final[Mapping[Tier, EngagementThresholds]] = MappingProxyType({
    Tier.NANO: EngagementThresholds(excellent=10, good=7, acceptable=4),
    Tier.MICRO: EngagementThresholds(excellent=8, good=5, acceptable=3),
    Tier.MID_TIER: EngagementThresholds(excellent=6, good=4, acceptable=2.5),
    Tier.MACRO: EngagementThresholds(excellent=4, good=2.5, acceptable=1.5),
    Tier.MEGA: EngagementThresholds(excellent=3, good=2, acceptable=1),
})
