"""The five independent sub-scorers combined by compat_scoring.scorer."""

from compat_scoring.signals.audience import score_audience_fit
from compat_scoring.signals.engagement import score_engagement_quality
from compat_scoring.signals.niche import extract_niches, score_niche_alignment
from compat_scoring.signals.safety import score_brand_safety
from compat_scoring.signals.sponsorship import score_sponsorship_history

__all__ = [
    "extract_niches",
    "score_audience_fit",
    "score_brand_safety",
    "score_engagement_quality",
    "score_niche_alignment",
    "score_sponsorship_history",
]
