"""TikTok profile scraper client using the Apify API."""

from __future__ import annotations

from typing import Any

import httpx
from compat_utils import get_logger, get_settings

from fetch_profiles.errors import ProfileSourceError

log = get_logger("fetch_profiles.client")

APIFY_BASE_URL = "https://api.apify.com/v2"
DEFAULT_ACTOR_ID = "apricot_blackberry/tiktok-profile-scraper"

# Extra time on top of the actor timeout for queueing and the response.
_HTTP_TIMEOUT_MARGIN_SECS = 30.0


class TikTokProfileClient:
    """Runs the TikTok profile scraper actor and returns its dataset items."""

    def __init__(
        self,
        api_token: str | None = None,
        *,
        actor_id: str = DEFAULT_ACTOR_ID,
        memory_mb: int = 1024,
        timeout_secs: int = 120,
        delay_between_requests_ms: int = 1000,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the scraper client.

        Args:
            api_token: Apify token. If not provided, reads from settings.
            actor_id: Scraper actor, "owner/name" form.
            memory_mb: Memory allotted to the actor run.
            timeout_secs: Actor run timeout.
            delay_between_requests_ms: Delay the scraper waits between profiles.
            transport: Optional httpx transport (tests).

        Raises:
            ProfileSourceError: If no token is available.
        """
        if api_token is None:
            settings = get_settings()
            if settings.apify_token is None:
                raise ProfileSourceError.token_missing()
            api_token = settings.apify_token.get_secret_value()

        self._actor_id = actor_id
        self._memory_mb = memory_mb
        self._timeout_secs = timeout_secs
        self._delay_ms = delay_between_requests_ms
        self._client = httpx.Client(
            base_url=APIFY_BASE_URL,
            headers={"Authorization": f"Bearer {api_token}"},
            timeout=timeout_secs + _HTTP_TIMEOUT_MARGIN_SECS,
            transport=transport,
        )

    def fetch_profiles(self, usernames: list[str]) -> list[dict[str, Any]]:
        """Scrape profiles for the given usernames.

        Args:
            usernames: TikTok handles (without @).

        Returns:
            Raw profile dicts as produced by the scraper; possibly fewer
            than requested.

        Raises:
            ProfileSourceError: On API errors or a malformed response.
        """
        if not usernames:
            return []

        log.info("fetching_profiles", actor=self._actor_id, count=len(usernames))

        endpoint = f"/acts/{self._actor_id.replace('/', '~')}/run-sync-get-dataset-items"
        try:
            response = self._client.post(
                endpoint,
                params={"memory": self._memory_mb, "timeout": self._timeout_secs},
                json={"usernames": usernames, "delayBetweenRequests": self._delay_ms},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e.response.status_code, e) from e
        except httpx.TimeoutException as e:
            raise ProfileSourceError.run_timeout(self._timeout_secs) from e
        except httpx.RequestError as e:
            raise ProfileSourceError.network_error(str(e)) from e

        try:
            items = response.json()
        except ValueError as e:
            raise ProfileSourceError.invalid_response("body is not JSON") from e

        if not isinstance(items, list):
            raise ProfileSourceError.invalid_response("expected a list of dataset items")

        profiles = [item for item in items if isinstance(item, dict)]
        log.info("profiles_fetched", requested=len(usernames), received=len(profiles))
        return profiles

    def _status_error(self, status: int, error: httpx.HTTPStatusError) -> ProfileSourceError:
        if status == 401:
            return ProfileSourceError.token_invalid()
        if status == 404:
            return ProfileSourceError.actor_not_found(self._actor_id)
        if status == 408:
            return ProfileSourceError.run_timeout(self._timeout_secs)
        if status == 429:
            return ProfileSourceError.rate_limited()
        return ProfileSourceError.network_error(str(error))

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> TikTokProfileClient:
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager."""
        self.close()
