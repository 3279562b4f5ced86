"""Pre-scoring validation and data completeness."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Final

from compat_utils import StrictModel
from pydantic import Field

from compat_scoring.types import CreatorProfile
from compat_scoring.weights import round_half_up


class ValidationLimits(StrictModel):
    """Upper bounds a creator record must respect to be scored."""

    max_followers: int = Field(default=1_000_000_000, gt=0)
    max_bio_length: int = Field(default=2_000, gt=0)


DEFAULT_LIMITS: Final = ValidationLimits()

# Fields counted by the data quality score.
DATA_QUALITY_FIELDS: Final[tuple[str, ...]] = (
    "username",
    "followers",
    "engagement_rate",
    "bio",
    "verified",
    "nickname",
)


def validate_creator(
    creator: CreatorProfile | None,
    limits: ValidationLimits = DEFAULT_LIMITS,
) -> list[str]:
    """Collect every range violation in a creator record.

    Args:
        creator: Profile to check; None counts as missing data.
        limits: Configured maxima.

    Returns:
        Error messages, empty when the record can be scored.
    """
    if creator is None:
        return ["Creator data is missing"]

    errors: list[str] = []

    followers = creator.followers
    if followers is not None:
        if followers < 0:
            errors.append(f"Followers count cannot be negative (got {followers})")
        elif followers > limits.max_followers:
            errors.append(
                f"Followers count exceeds maximum of {limits.max_followers:,} (got {followers:,})"
            )

    rate = creator.engagement_rate
    if rate is not None and (math.isnan(rate) or not 0 <= rate <= 100):
        errors.append(f"Engagement rate must be between 0 and 100 (got {rate})")

    bio = creator.bio
    if bio is not None and len(bio) > limits.max_bio_length:
        errors.append(
            f"Bio exceeds maximum length of {limits.max_bio_length} characters (got {len(bio)})"
        )

    return errors


def data_quality_score(creator: CreatorProfile) -> int:
    """Percentage of DATA_QUALITY_FIELDS present and non-empty."""
    present = 0
    for field in DATA_QUALITY_FIELDS:
        value = getattr(creator, field)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        present += 1
    return round_half_up(Decimal(present * 100) / Decimal(len(DATA_QUALITY_FIELDS)))
