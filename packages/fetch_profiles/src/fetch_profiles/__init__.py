"""TikTok profile source backed by a scraper actor on Apify.

Fetches raw creator profiles for a list of usernames. Failures surface as
ProfileSourceError; callers decide whether to degrade or abort.
"""

from fetch_profiles.client import TikTokProfileClient
from fetch_profiles.errors import ErrorCode, ProfileSourceError

__all__ = ["ErrorCode", "ProfileSourceError", "TikTokProfileClient"]
