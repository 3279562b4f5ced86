"""Brand safety scan of the creator's bio and nickname."""

from __future__ import annotations

from typing import Final

from compat_scoring.lexicon import HIGH_RISK_KEYWORDS, LOW_RISK_KEYWORDS, MEDIUM_RISK_KEYWORDS
from compat_scoring.matching import find_keywords, profile_text
from compat_scoring.types import CreatorProfile, RiskLevel, SafetyScore

HIGH_RISK_DEDUCTION: Final = 30
MEDIUM_RISK_DEDUCTION: Final = 15


def score_brand_safety(creator: CreatorProfile) -> SafetyScore:
    """Deduct points for every risky keyword found in the profile.

    Each distinct high-risk keyword costs 30 points and each medium-risk
    keyword 15; deductions add up and the score floors at 0. Sponsorship
    mentions are reported without deduction.
    """
    text = profile_text(creator)
    high_risk = find_keywords(text, HIGH_RISK_KEYWORDS)
    medium_risk = find_keywords(text, MEDIUM_RISK_KEYWORDS)

    flags = [f'High risk: "{keyword}" found in profile' for keyword in high_risk]
    flags += [f'Medium risk: "{keyword}" found in profile' for keyword in medium_risk]

    deduction = HIGH_RISK_DEDUCTION * len(high_risk) + MEDIUM_RISK_DEDUCTION * len(medium_risk)

    if deduction > HIGH_RISK_DEDUCTION:
        risk_level = RiskLevel.HIGH
    elif deduction > 0:
        risk_level = RiskLevel.MEDIUM
    else:
        risk_level = RiskLevel.LOW

    return SafetyScore(
        score=max(0, 100 - deduction),
        message=(
            f"{len(flags)} potential brand safety issue(s)"
            if flags
            else "No brand safety concerns detected"
        ),
        risk_level=risk_level,
        flags=flags,
        high_risk=high_risk,
        medium_risk=medium_risk,
        sponsorship_mentions=find_keywords(text, LOW_RISK_KEYWORDS),
    )
