"""Pytest fixtures and configuration."""

from __future__ import annotations

import os

# Set environment variables BEFORE any imports that might load settings
# This is necessary because settings are cached at import time
os.environ.setdefault("APP_MODE", "development")
os.environ.setdefault("LOG_LEVEL", "silent")

import pytest
from compat_scoring import BrandProfile, CreatorProfile


@pytest.fixture
def tech_brand() -> BrandProfile:
    """Technology brand targeting micro creators."""
    return BrandProfile(category="technology", name="Acme Corp", targetTier="micro")


@pytest.fixture
def tech_reviewer() -> CreatorProfile:
    """Verified micro creator with a bio link and a tech bio."""
    return CreatorProfile.model_validate({
        "followers": 25000,
        "engagementRate": 6.0,
        "verified": True,
        "bioLink": "linktr.ee/x",
        "bio": "tech reviewer and gadget lover",
    })


@pytest.fixture
def star_creator() -> CreatorProfile:
    """Commerce-enabled micro creator with excellent engagement."""
    return CreatorProfile.model_validate({
        "username": "star",
        "nickname": "Star Tech",
        "followers": 25000,
        "engagementRate": 9.0,
        "verified": True,
        "commerceUser": True,
        "bio": "tech gamer",
    })


@pytest.fixture
def weak_creator() -> CreatorProfile:
    """Mega pet/family creator with low engagement and no setup."""
    return CreatorProfile.model_validate({
        "username": "weak",
        "followers": 2_000_000,
        "engagementRate": 0.5,
        "bio": "dog mom",
    })


@pytest.fixture
def sample_raw_profiles() -> list[dict]:
    """Raw scraper items, including fields the scorer ignores."""
    return [
        {
            "username": "alpha",
            "nickname": "Alpha",
            "bio": "tech reviewer",
            "followers": 25000,
            "engagementRate": 6.0,
            "verified": True,
            "bioLink": "linktr.ee/alpha",
            "following": 120,
            "videos": 340,
        },
        {
            "username": "beta",
            "nickname": "Beta",
            "bio": "dog mom",
            "followers": 2_000_000,
            "engagementRate": 0.5,
            "verified": False,
        },
    ]
