"""Creator profile collection.

This module handles:
- Converting raw profile dicts into CreatorProfile records
- Calling the TikTok scraper for additional usernames
- Degrading to the profiles already available when scraping fails
- NO scoring (that's handled by evaluate.py)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from compat_scoring import CreatorProfile
from compat_utils import get_logger
from fetch_profiles import ProfileSourceError, TikTokProfileClient
from pydantic import ValidationError

from tasks.config import PipelineConfig, get_config
from tasks.errors import NoCreatorsError
from tasks.inputs import RunInput

log = get_logger("tasks.fetch")


def parse_profiles(
    raw_profiles: Iterable[dict[str, Any] | None],
) -> list[CreatorProfile | None]:
    """Convert raw profile dicts, skipping records that cannot be coerced.

    Null records and range problems (negative followers, ...) are not
    rejected here; they reach the scorer and come back as "Invalid Data"
    results.
    """
    creators: list[CreatorProfile | None] = []
    for index, raw in enumerate(raw_profiles):
        if raw is None:
            creators.append(None)
            continue
        try:
            creators.append(CreatorProfile.model_validate(raw))
        except ValidationError as e:
            log.warning(
                "profile_rejected",
                index=index,
                username=raw.get("username"),
                errors=e.error_count(),
            )
    return creators


def fetch_creators(
    usernames: list[str],
    *,
    api_token: str | None = None,
    config: PipelineConfig | None = None,
) -> list[CreatorProfile | None]:
    """Scrape and parse profiles for the given usernames.

    Raises:
        ProfileSourceError: On scraper errors.
    """
    config = config or get_config()

    with TikTokProfileClient(
        api_token,
        actor_id=config.scraper_actor_id,
        memory_mb=config.scraper_memory_mb,
        timeout_secs=config.scraper_timeout_secs,
        delay_between_requests_ms=config.delay_between_requests_ms,
    ) as client:
        raw_profiles = client.fetch_profiles(usernames)

    return parse_profiles(raw_profiles)


def collect_creators(
    run_input: RunInput,
    config: PipelineConfig | None = None,
) -> list[CreatorProfile | None]:
    """Gather every creator available for the run.

    Pre-fetched profiles come first, followed by scraped ones. A scraper
    failure is logged and the run continues with what is available.

    Raises:
        NoCreatorsError: If no creator is available at all.
    """
    creators = parse_profiles(run_input.profiles)

    if run_input.fetch_profiles and run_input.tiktok_usernames:
        token = run_input.api_token.get_secret_value() if run_input.api_token else None
        try:
            fetched = fetch_creators(run_input.tiktok_usernames, api_token=token, config=config)
        except ProfileSourceError as e:
            log.error("profile_fetch_failed", code=e.code, error=e.message)
        else:
            creators.extend(fetched)

    if not creators:
        raise NoCreatorsError

    log.info(
        "creators_collected",
        count=len(creators),
        prefetched=len(run_input.profiles),
        requested=len(run_input.tiktok_usernames),
    )
    return creators
