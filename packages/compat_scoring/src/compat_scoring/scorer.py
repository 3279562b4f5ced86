"""Brand compatibility aggregation.

Runs the five sub-scorers, combines them with fixed weights and derives
the rating, recommendation, strengths and flags:

    overall = niche*0.30 + engagement*0.25 + audience*0.15 + safety*0.20 + history*0.10
"""

from __future__ import annotations

from typing import Final

from compat_utils import get_logger

from compat_scoring.signals import (
    score_audience_fit,
    score_brand_safety,
    score_engagement_quality,
    score_niche_alignment,
    score_sponsorship_history,
)
from compat_scoring.types import (
    BrandProfile,
    CompatibilityResult,
    Confidence,
    CreatorProfile,
    NicheScore,
    Rating,
    Recommendation,
    RecommendationAction,
    SafetyScore,
    SubScoreBase,
)
from compat_scoring.validation import (
    DEFAULT_LIMITS,
    ValidationLimits,
    data_quality_score,
    validate_creator,
)
from compat_scoring.weights import weighted_total

log = get_logger("compat_scoring.scorer")

STRENGTH_THRESHOLD: Final = 80
FLAG_THRESHOLD: Final = 50
CLEAN_SAFETY_THRESHOLD: Final = 90
CLEAN_SAFETY_STRENGTH: Final = "Clean brand safety profile"

RATING_LADDER: Final[tuple[tuple[int, Rating], ...]] = (
    (85, Rating(label="Excellent Match", marker="🎯", color="green")),
    (70, Rating(label="Good Match", marker="✅", color="light-green")),
    (55, Rating(label="Moderate Match", marker="🟡", color="yellow")),
    (40, Rating(label="Weak Match", marker="🟠", color="orange")),
)
POOR_MATCH: Final = Rating(label="Poor Match", marker="🔴", color="red")
INVALID_DATA: Final = Rating(label="Invalid Data", marker="❌", color="gray")

AVOID: Final = Recommendation(
    action=RecommendationAction.AVOID,
    message="Brand safety concerns detected. Not recommended for partnership.",
    confidence=Confidence.HIGH,
)
RECOMMENDATION_LADDER: Final[tuple[tuple[int, Recommendation], ...]] = (
    (
        80,
        Recommendation(
            action=RecommendationAction.STRONG_RECOMMEND,
            message="Excellent fit. Strongly recommend reaching out for partnership.",
            confidence=Confidence.HIGH,
        ),
    ),
    (
        65,
        Recommendation(
            action=RecommendationAction.RECOMMEND,
            message="Good fit. Worth exploring a partnership opportunity.",
            confidence=Confidence.MEDIUM,
        ),
    ),
    (
        50,
        Recommendation(
            action=RecommendationAction.CONSIDER,
            message="Moderate fit. May work depending on specific campaign needs.",
            confidence=Confidence.LOW,
        ),
    ),
)
NOT_RECOMMENDED: Final = Recommendation(
    action=RecommendationAction.NOT_RECOMMENDED,
    message="Low compatibility. Consider other creators.",
    confidence=Confidence.MEDIUM,
)
INVALID_RECOMMENDATION: Final = Recommendation(
    action=RecommendationAction.ERROR,
    message="Creator data failed validation and could not be scored.",
    confidence=Confidence.HIGH,
)


def score_brand_compatibility(
    creator: CreatorProfile | None,
    brand: BrandProfile,
    *,
    limits: ValidationLimits = DEFAULT_LIMITS,
) -> CompatibilityResult:
    """Score how well a creator fits a brand.

    Args:
        creator: Creator profile; None or out-of-range data yields an
            "Invalid Data" result carrying the validation errors as flags.
        brand: Brand profile.
        limits: Validation maxima for followers and bio length.

    Returns:
        CompatibilityResult with overall score, rating, recommendation,
        per-scorer results, strengths and flags.
    """
    errors = validate_creator(creator, limits)
    if creator is None or errors:
        log.warning(
            "creator_invalid",
            username=creator.username if creator is not None else None,
            errors=errors,
        )
        return CompatibilityResult(
            overall_score=0,
            rating=INVALID_DATA,
            recommendation=INVALID_RECOMMENDATION,
            scores={},
            strengths=[],
            flags=errors,
        )

    niche = score_niche_alignment(creator, brand)
    engagement = score_engagement_quality(creator)
    audience = score_audience_fit(creator, brand)
    safety = score_brand_safety(creator)
    history = score_sponsorship_history(creator)

    scores = {
        "niche": niche,
        "engagement": engagement,
        "audience": audience,
        "safety": safety,
        "history": history,
    }
    overall = weighted_total({name: result.score for name, result in scores.items()})
    strengths, flags = _collect_findings(niche, engagement, safety, history)

    return CompatibilityResult(
        overall_score=overall,
        rating=get_rating(overall),
        recommendation=get_recommendation(overall, safety_veto=bool(safety.high_risk)),
        scores=scores,
        strengths=strengths,
        flags=flags,
        data_quality_score=data_quality_score(creator),
    )


def get_rating(score: int) -> Rating:
    """Map an overall score to its rating."""
    for threshold, rating in RATING_LADDER:
        if score >= threshold:
            return rating
    return POOR_MATCH


def get_recommendation(score: int, *, safety_veto: bool = False) -> Recommendation:
    """Map an overall score to an action; a high-risk safety match always means avoid."""
    if safety_veto:
        return AVOID
    for threshold, recommendation in RECOMMENDATION_LADDER:
        if score >= threshold:
            return recommendation
    return NOT_RECOMMENDED


def _collect_findings(
    niche: NicheScore,
    engagement: SubScoreBase,
    safety: SafetyScore,
    history: SubScoreBase,
) -> tuple[list[str], list[str]]:
    """Gather strengths and flags; audience fit never contributes."""
    strengths: list[str] = []
    flags: list[str] = []

    for result in (niche, engagement):
        if result.score >= STRENGTH_THRESHOLD:
            strengths.append(result.message)
        if result.score < FLAG_THRESHOLD:
            flags.append(result.message)

    flags.extend(safety.flags)
    if safety.score >= CLEAN_SAFETY_THRESHOLD:
        strengths.append(CLEAN_SAFETY_STRENGTH)

    if history.score >= STRENGTH_THRESHOLD:
        strengths.append(history.message)

    return strengths, flags
