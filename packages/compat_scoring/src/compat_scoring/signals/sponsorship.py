"""Sponsorship readiness from account setup signals."""

from __future__ import annotations

from compat_scoring.types import CreatorProfile, SponsorshipScore


def score_sponsorship_history(creator: CreatorProfile) -> SponsorshipScore:
    """Score readiness for brand deals; the first matching rule wins.

    1. Commerce/seller account: 95
    2. Verified with two or more bio links: 90
    3. Verified with a bio link: 80
    4. Bio link, not verified: 65
    5. Verified, no bio link: 60
    6. Neither: 40
    """
    links = creator.external_links
    verified = bool(creator.verified)

    if creator.is_commerce:
        score = 95
        message = "Commerce-enabled account - proven monetization infrastructure"
    elif verified and len(links) >= 2:
        score = 90
        message = "Verified with multiple bio links - highly brand-ready"
    elif verified and links:
        score = 80
        message = "Verified with bio link - professional intent"
    elif links:
        score = 65
        message = "Has bio link - some readiness for brand deals"
    elif verified:
        score = 60
        message = "Verified but no external links - minimal external setup"
    else:
        score = 40
        message = "No bio link or verification - limited professional setup"

    return SponsorshipScore(score=score, message=message, link_count=len(links))
