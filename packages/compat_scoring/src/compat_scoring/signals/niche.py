"""Niche alignment between a creator's detected niches and the brand category."""

from __future__ import annotations

from compat_scoring.lexicon import BRAND_NICHE_MAP, NICHE_KEYWORDS, VERIFIED_NICHE
from compat_scoring.matching import contains_keyword, profile_text
from compat_scoring.types import BrandProfile, CreatorProfile, NicheScore


def score_niche_alignment(creator: CreatorProfile, brand: BrandProfile) -> NicheScore:
    """Score how well the creator's niches fit the brand category.

    Args:
        creator: Creator profile.
        brand: Brand profile; an unknown or missing category accepts no niche.

    Returns:
        NicheScore with detected niches and the ones the brand accepts.
    """
    compatible = compatible_niches(brand)
    niches = extract_niches(creator)
    matches = [
        niche for niche in niches if any(niches_overlap(niche, other) for other in compatible)
    ]

    if len(matches) >= 2:
        return NicheScore(
            score=95,
            message=f"Strong niche alignment: {', '.join(matches)}",
            niches=niches,
            matches=matches,
        )
    if len(matches) == 1:
        return NicheScore(
            score=75,
            message=f"Good niche alignment: {matches[0]}",
            niches=niches,
            matches=matches,
        )
    if not niches:
        return NicheScore(score=50, message="Unable to determine creator niche")
    return NicheScore(
        score=30,
        message=f"Low niche alignment - creator focuses on: {', '.join(niches[:3])}",
        niches=niches,
    )


def extract_niches(creator: CreatorProfile) -> list[str]:
    """Detect creator niches from bio and nickname, in NICHE_KEYWORDS order."""
    text = profile_text(creator)
    niches = [
        niche
        for niche, keywords in NICHE_KEYWORDS.items()
        if any(contains_keyword(text, keyword) for keyword in keywords)
    ]
    if creator.verified and VERIFIED_NICHE not in niches:
        niches.append(VERIFIED_NICHE)
    return niches


def compatible_niches(brand: BrandProfile) -> tuple[str, ...]:
    """Niches accepted for the brand's category."""
    return BRAND_NICHE_MAP.get(brand.category_key, ())


def niches_overlap(first: str, second: str) -> bool:
    """Loose match: either name contains the other ("health" ~ "mental health").

    This is a string heuristic, not a lemmatizer.
    """
    return first in second or second in first
