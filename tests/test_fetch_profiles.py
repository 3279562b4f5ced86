"""Tests for the TikTok profile scraper client."""

from __future__ import annotations

import json
from collections.abc import Callable
from unittest.mock import MagicMock, patch

import httpx
import pytest
from fetch_profiles import ErrorCode, ProfileSourceError, TikTokProfileClient

Handler = Callable[[httpx.Request], httpx.Response]


def _client(handler: Handler) -> TikTokProfileClient:
    return TikTokProfileClient("test-token", transport=httpx.MockTransport(handler))


class TestTikTokProfileClient:
    """Tests for TikTokProfileClient."""

    def test_fetch_profiles(self) -> None:
        """Test a successful actor run returns dataset items."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json=[{"username": "alpha"}, {"username": "beta"}])

        with _client(handler) as client:
            profiles = client.fetch_profiles(["alpha", "beta"])

        assert profiles == [{"username": "alpha"}, {"username": "beta"}]
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == (
            "/v2/acts/apricot_blackberry~tiktok-profile-scraper/run-sync-get-dataset-items"
        )
        assert request.url.params["memory"] == "1024"
        assert request.url.params["timeout"] == "120"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert json.loads(request.content) == {
            "usernames": ["alpha", "beta"],
            "delayBetweenRequests": 1000,
        }

    def test_empty_usernames_skip_request(self) -> None:
        """Test no request is made without usernames."""
        handler = MagicMock(side_effect=AssertionError("unexpected request"))

        with _client(handler) as client:
            assert client.fetch_profiles([]) == []

        handler.assert_not_called()

    def test_non_dict_items_dropped(self) -> None:
        """Test stray non-object items are ignored."""
        with _client(lambda _: httpx.Response(200, json=[{"username": "a"}, "junk", 3])) as client:
            assert client.fetch_profiles(["a"]) == [{"username": "a"}]

    @pytest.mark.parametrize(
        ("status", "code"),
        [
            (401, ErrorCode.TOKEN_INVALID),
            (404, ErrorCode.ACTOR_NOT_FOUND),
            (408, ErrorCode.RUN_TIMEOUT),
            (429, ErrorCode.RATE_LIMITED),
            (500, ErrorCode.NETWORK_ERROR),
        ],
    )
    def test_http_errors(self, status: int, code: ErrorCode) -> None:
        """Test HTTP status codes map onto error codes."""
        with _client(lambda _: httpx.Response(status, json={"error": {}})) as client:
            with pytest.raises(ProfileSourceError) as exc_info:
                client.fetch_profiles(["alpha"])

        assert exc_info.value.is_code(code)

    def test_unexpected_payload(self) -> None:
        """Test a non-list body is an invalid response."""
        with _client(lambda _: httpx.Response(200, json={"data": {}})) as client:
            with pytest.raises(ProfileSourceError) as exc_info:
                client.fetch_profiles(["alpha"])

        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    def test_non_json_body(self) -> None:
        """Test a non-JSON body is an invalid response."""
        with _client(lambda _: httpx.Response(200, text="<html>")) as client:
            with pytest.raises(ProfileSourceError) as exc_info:
                client.fetch_profiles(["alpha"])

        assert exc_info.value.code == ErrorCode.INVALID_RESPONSE

    def test_connection_error(self) -> None:
        """Test transport failures become network errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(ProfileSourceError) as exc_info:
                client.fetch_profiles(["alpha"])

        assert exc_info.value.code == ErrorCode.NETWORK_ERROR
        assert exc_info.value.http_status == 502

    def test_client_timeout(self) -> None:
        """Test a client-side timeout becomes a run timeout."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with _client(handler) as client:
            with pytest.raises(ProfileSourceError) as exc_info:
                client.fetch_profiles(["alpha"])

        assert exc_info.value.code == ErrorCode.RUN_TIMEOUT

    @patch("fetch_profiles.client.get_settings")
    def test_token_missing(self, mock_get_settings: MagicMock) -> None:
        """Test a missing token fails fast."""
        mock_get_settings.return_value = MagicMock(apify_token=None)

        with pytest.raises(ProfileSourceError) as exc_info:
            TikTokProfileClient()

        assert exc_info.value.code == ErrorCode.TOKEN_MISSING

    @patch("fetch_profiles.client.get_settings")
    def test_token_from_settings(self, mock_get_settings: MagicMock) -> None:
        """Test the token is read from settings when not given."""
        token = MagicMock()
        token.get_secret_value.return_value = "from-settings"
        mock_get_settings.return_value = MagicMock(apify_token=token)

        with TikTokProfileClient() as client:
            assert client._client.headers["Authorization"] == "Bearer from-settings"
