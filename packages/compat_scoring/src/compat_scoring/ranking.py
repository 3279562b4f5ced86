"""Rank a batch of creators for one brand."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from functools import partial

from compat_utils import get_logger

from compat_scoring.scorer import score_brand_compatibility
from compat_scoring.types import (
    BrandProfile,
    CreatorProfile,
    RankedCreator,
    RankingResult,
    RankingSummary,
)
from compat_scoring.validation import DEFAULT_LIMITS, ValidationLimits

log = get_logger("compat_scoring.ranking")


def rank_creators_for_brand(
    creators: Iterable[CreatorProfile | None],
    brand: BrandProfile,
    *,
    limits: ValidationLimits = DEFAULT_LIMITS,
    max_workers: int | None = None,
) -> RankingResult:
    """Score every creator for the brand and sort best first.

    Evaluations are independent, so they may run on a thread pool when
    max_workers is given. Ties keep their input order.

    Args:
        creators: Creator profiles; invalid ones rank with score 0.
        brand: Brand profile.
        limits: Validation maxima passed to each evaluation.
        max_workers: Thread pool size; None or 1 evaluates sequentially.

    Returns:
        RankingResult with ranked creators, top pick and bucket summary.
    """
    creators = list(creators)
    evaluate = partial(_evaluate, brand=brand, limits=limits)

    if max_workers is not None and max_workers > 1 and len(creators) > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, len(creators))) as pool:
            entries = list(pool.map(evaluate, creators))
    else:
        entries = [evaluate(creator) for creator in creators]

    ranked = sorted(entries, key=lambda entry: entry.overall_score, reverse=True)
    summary = summarize(ranked)

    log.info(
        "creators_ranked",
        brand=brand.identity,
        count=len(ranked),
        top_score=ranked[0].overall_score if ranked else None,
    )

    return RankingResult(
        brand=brand.identity,
        ranked_creators=ranked,
        top_pick=ranked[0] if ranked else None,
        summary=summary,
    )


def summarize(entries: Iterable[RankedCreator]) -> RankingSummary:
    """Count creators per bucket: excellent >=85, good 70-84, moderate 55-69, weak below."""
    counts = {"excellent": 0, "good": 0, "moderate": 0, "weak": 0}
    for entry in entries:
        counts[bucket_for(entry.overall_score)] += 1
    return RankingSummary(**counts)


def bucket_for(score: int) -> str:
    """Summary bucket name for an overall score."""
    if score >= 85:
        return "excellent"
    if score >= 70:
        return "good"
    if score >= 55:
        return "moderate"
    return "weak"


def _evaluate(
    creator: CreatorProfile | None,
    *,
    brand: BrandProfile,
    limits: ValidationLimits,
) -> RankedCreator:
    result = score_brand_compatibility(creator, brand, limits=limits)
    return RankedCreator(
        username=creator.username if creator is not None else None,
        **dict(result),
    )
