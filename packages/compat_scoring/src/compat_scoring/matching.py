"""Case-insensitive, word-boundary keyword matching over profile text."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from compat_scoring.types import CreatorProfile

# Lookarounds reject a neighbouring letter or digit, so "scandal" never
# matches inside "scandalous" and "sandal" never matches "sandals".
_NOT_AFTER_ALNUM = r"(?<![^\W_])"
_NOT_BEFORE_ALNUM = r"(?![^\W_])"


@lru_cache(maxsize=2048)
def _keyword_pattern(keyword: str) -> re.Pattern[str]:
    return re.compile(
        f"{_NOT_AFTER_ALNUM}{re.escape(keyword)}{_NOT_BEFORE_ALNUM}",
        re.IGNORECASE,
    )


def contains_keyword(text: str, keyword: str) -> bool:
    """Check whether keyword occurs in text as a whole word or phrase.

    Multi-word keywords ("how to", "day in") match literally, with
    boundaries enforced only at their outer edges.
    """
    if not keyword:
        return False
    return _keyword_pattern(keyword).search(text) is not None


def find_keywords(text: str, keywords: Iterable[str]) -> list[str]:
    """Return the keywords present in text, in table order."""
    return [keyword for keyword in keywords if contains_keyword(text, keyword)]


def profile_text(creator: CreatorProfile) -> str:
    """Lowercased bio and nickname joined by a space."""
    return f"{creator.bio or ''} {creator.nickname or ''}".lower()
