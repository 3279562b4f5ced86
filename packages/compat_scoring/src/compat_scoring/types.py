"""Input profiles and result records for brand compatibility scoring."""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from compat_utils import ProfileModel, StrictModel
from pydantic import AliasChoices, Field, field_validator


class Tier(StrEnum):
    """Creator size tier, ordered from smallest to largest audience."""

    NANO = "nano"
    MICRO = "micro"
    MID_TIER = "mid-tier"
    MACRO = "macro"
    MEGA = "mega"


class RiskLevel(StrEnum):
    """Overall brand safety risk."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RecommendationAction(StrEnum):
    """Partnership recommendation emitted for a creator."""

    STRONG_RECOMMEND = "strong_recommend"
    RECOMMEND = "recommend"
    CONSIDER = "consider"
    NOT_RECOMMENDED = "not_recommended"
    AVOID = "avoid"
    ERROR = "error"


class Confidence(StrEnum):
    """Confidence attached to a recommendation."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# =============================================================================
# Inputs
# =============================================================================


class CreatorProfile(ProfileModel):
    """Creator profile as returned by the scraper or supplied pre-fetched.

    Range checks (negative followers, oversized bio, ...) are not enforced
    here; they are collected by compat_scoring.validation so a bad record
    yields an "Invalid Data" result instead of an exception.
    """

    username: str | None = None
    nickname: str | None = None
    bio: str | None = None
    followers: int | None = None
    engagement_rate: float | None = Field(default=None, alias="engagementRate")
    verified: bool | None = None
    bio_link: str | None = Field(default=None, alias="bioLink")
    bio_links: list[str] | None = Field(default=None, alias="bioLinks")
    commerce_user: bool | None = Field(default=None, alias="commerceUser")
    seller: bool | None = Field(
        default=None,
        validation_alias=AliasChoices("ttSeller", "sellerFlag", "seller"),
        serialization_alias="ttSeller",
    )

    @property
    def external_links(self) -> list[str]:
        """Distinct non-empty links from bioLink and bioLinks, in order."""
        links: list[str] = []
        for link in [self.bio_link, *(self.bio_links or [])]:
            if link and link.strip() and link.strip() not in links:
                links.append(link.strip())
        return links

    @property
    def is_commerce(self) -> bool:
        """Commerce or seller account."""
        return bool(self.commerce_user or self.seller)


class BrandProfile(ProfileModel):
    """Brand the creators are scored against."""

    category: str | None = None
    name: str | None = None
    target_tier: Tier | None = Field(default=None, alias="targetTier")

    @field_validator("target_tier", mode="before")
    @classmethod
    def _normalize_target_tier(cls, value: object) -> object:
        """Lowercase the tier label; "any" or blank means no constraint."""
        if isinstance(value, str):
            value = value.strip().lower()
            if value in ("", "any"):
                return None
        return value

    @property
    def category_key(self) -> str:
        """Lowercased category used for niche lookups."""
        return (self.category or "").strip().lower()

    @property
    def identity(self) -> str | None:
        """Name shown in reports, falling back to category."""
        return self.name or self.category


# =============================================================================
# Sub-scores
# =============================================================================


class SubScoreBase(StrictModel):
    """Fields shared by every sub-scorer result."""

    score: int = Field(ge=0, le=100)
    message: str


class NicheScore(SubScoreBase):
    """Niche alignment between creator and brand category."""

    kind: Literal["niche"] = "niche"
    niches: list[str] = Field(default_factory=list, description="Niches detected for the creator")
    matches: list[str] = Field(default_factory=list, description="Detected niches the brand accepts")


class EngagementScore(SubScoreBase):
    """Engagement rate judged against the creator's tier."""

    kind: Literal["engagement"] = "engagement"
    tier: Tier
    engagement_rate: float = Field(alias="engagementRate")


class AudienceScore(SubScoreBase):
    """Audience size fit against the brand's target tier."""

    kind: Literal["audience"] = "audience"
    tier: Tier
    target_tier: Tier | None = Field(default=None, alias="targetTier")


class SafetyScore(SubScoreBase):
    """Brand safety keyword scan."""

    kind: Literal["safety"] = "safety"
    risk_level: RiskLevel = Field(alias="riskLevel")
    flags: list[str] = Field(default_factory=list)
    high_risk: list[str] = Field(default_factory=list, alias="highRisk")
    medium_risk: list[str] = Field(default_factory=list, alias="mediumRisk")
    sponsorship_mentions: list[str] = Field(
        default_factory=list,
        alias="sponsorshipMentions",
        description="Informational only, no deduction",
    )


class SponsorshipScore(SubScoreBase):
    """Readiness for sponsored content."""

    kind: Literal["history"] = "history"
    link_count: int = Field(default=0, alias="linkCount")


SubScore = Annotated[
    NicheScore | EngagementScore | AudienceScore | SafetyScore | SponsorshipScore,
    Field(discriminator="kind"),
]


# =============================================================================
# Aggregate results
# =============================================================================


class Rating(StrictModel):
    """Rating label derived from the overall score."""

    label: str
    marker: str
    color: str


class Recommendation(StrictModel):
    """Action recommendation derived from score and safety veto."""

    action: RecommendationAction
    message: str
    confidence: Confidence


class CompatibilityResult(StrictModel):
    """Complete brand compatibility evaluation for one creator."""

    overall_score: int = Field(ge=0, le=100, alias="overallScore")
    rating: Rating
    recommendation: Recommendation
    scores: dict[str, SubScore] = Field(default_factory=dict)
    strengths: list[str] = Field(default_factory=list)
    flags: list[str] = Field(default_factory=list)
    data_quality_score: int | None = Field(default=None, ge=0, le=100, alias="dataQualityScore")


class RankedCreator(CompatibilityResult):
    """Compatibility result tagged with the creator's username."""

    username: str | None = None


class RankingSummary(StrictModel):
    """Creator counts per rating bucket."""

    excellent: int = 0
    good: int = 0
    moderate: int = 0
    weak: int = 0

    @property
    def total(self) -> int:
        """Number of creators across all buckets."""
        return self.excellent + self.good + self.moderate + self.weak


class RankingResult(StrictModel):
    """Creators ranked for one brand, best first."""

    brand: str | None
    ranked_creators: list[RankedCreator] = Field(alias="rankedCreators")
    top_pick: RankedCreator | None = Field(alias="topPick")
    summary: RankingSummary
