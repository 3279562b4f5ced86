"""Brand-creator compatibility scoring.

Five independent sub-scorers (niche alignment, engagement quality,
audience fit, brand safety, sponsorship readiness) produce 0-100 scores
that are combined with fixed weights into an overall score, a rating and
a partnership recommendation. The ranker applies this to a batch of
creators for one brand.
"""

from compat_scoring.matching import contains_keyword
from compat_scoring.ranking import rank_creators_for_brand
from compat_scoring.scorer import get_rating, get_recommendation, score_brand_compatibility
from compat_scoring.tiers import classify_tier
from compat_scoring.types import (
    BrandProfile,
    CompatibilityResult,
    CreatorProfile,
    RankedCreator,
    RankingResult,
    RankingSummary,
    RecommendationAction,
    Tier,
)
from compat_scoring.validation import DEFAULT_LIMITS, ValidationLimits, validate_creator

__all__ = [
    "DEFAULT_LIMITS",
    "BrandProfile",
    "CompatibilityResult",
    "CreatorProfile",
    "RankedCreator",
    "RankingResult",
    "RankingSummary",
    "RecommendationAction",
    "Tier",
    "ValidationLimits",
    "classify_tier",
    "contains_keyword",
    "get_rating",
    "get_recommendation",
    "rank_creators_for_brand",
    "score_brand_compatibility",
    "validate_creator",
]
