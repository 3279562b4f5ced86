"""Sub-score weights and integer rounding for the overall score."""

from __future__ import annotations

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Final

SCORE_WEIGHTS: Final[Mapping[str, Decimal]] = MappingProxyType({
    "niche": Decimal("0.30"),
    "engagement": Decimal("0.25"),
    "audience": Decimal("0.15"),
    "safety": Decimal("0.20"),
    "history": Decimal("0.10"),
})


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves away from zero (83.5 -> 84)."""
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def weighted_total(scores: Mapping[str, int]) -> int:
    """Combine sub-scores keyed by scorer name into the 0-100 overall score."""
    total = sum(
        (Decimal(scores[name]) * weight for name, weight in SCORE_WEIGHTS.items()),
        Decimal("0"),
    )
    return round_half_up(total)
