"""Tests for creator collection."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from fetch_profiles import ProfileSourceError

from tasks.errors import NoCreatorsError
from tasks.inputs import parse_run_input


def _mock_client(mock_client_class: MagicMock) -> MagicMock:
    mock_client = MagicMock()
    mock_client.__enter__ = MagicMock(return_value=mock_client)
    mock_client.__exit__ = MagicMock(return_value=False)
    mock_client_class.return_value = mock_client
    return mock_client


class TestParseProfiles:
    """Tests for parse_profiles."""

    def test_parse_raw_profiles(self, sample_raw_profiles: list[dict]) -> None:
        """Test scraper items become creator profiles."""
        from tasks.fetch import parse_profiles

        creators = parse_profiles(sample_raw_profiles)

        assert [c.username for c in creators] == ["alpha", "beta"]
        assert creators[0].engagement_rate == 6.0

    def test_skips_uncoercible_records(self) -> None:
        """Test malformed records are dropped, range errors are kept."""
        from tasks.fetch import parse_profiles

        creators = parse_profiles([
            {"username": "bad", "followers": "lots"},
            {"username": "negative", "followers": -5},
        ])

        assert [c.username for c in creators] == ["negative"]

    def test_null_records_pass_through(self) -> None:
        """Test null records are kept in place for the scorer."""
        from tasks.fetch import parse_profiles

        creators = parse_profiles([{"username": "ok"}, None])

        assert creators[0].username == "ok"
        assert creators[1] is None


class TestCollectCreators:
    """Tests for collect_creators."""

    def test_prefetched_only(self, sample_raw_profiles: list[dict]) -> None:
        """Test pre-fetched profiles without scraping."""
        from tasks.fetch import collect_creators

        run_input = parse_run_input({
            "brand": {"name": "Acme"},
            "profiles": sample_raw_profiles,
            "fetchProfiles": False,
            "tiktokUsernames": ["ignored"],
        })

        creators = collect_creators(run_input)

        assert len(creators) == 2

    @patch("tasks.fetch.TikTokProfileClient")
    def test_fetched_appended(
        self,
        mock_client_class: MagicMock,
        sample_raw_profiles: list[dict],
    ) -> None:
        """Test scraped profiles follow the pre-fetched ones."""
        from tasks.fetch import collect_creators

        mock_client = _mock_client(mock_client_class)
        mock_client.fetch_profiles.return_value = [{"username": "gamma", "followers": 100}]

        run_input = parse_run_input({
            "brand": {"name": "Acme"},
            "profiles": sample_raw_profiles[:1],
            "tiktokUsernames": ["gamma"],
            "apiToken": "token",
        })

        creators = collect_creators(run_input)

        assert [c.username for c in creators] == ["alpha", "gamma"]
        mock_client.fetch_profiles.assert_called_once_with(["gamma"])
        assert mock_client_class.call_args.args == ("token",)

    @patch("tasks.fetch.TikTokProfileClient")
    def test_fetch_failure_degrades(
        self,
        mock_client_class: MagicMock,
        sample_raw_profiles: list[dict],
    ) -> None:
        """Test a scraper failure keeps the pre-fetched profiles."""
        from tasks.fetch import collect_creators

        mock_client = _mock_client(mock_client_class)
        mock_client.fetch_profiles.side_effect = ProfileSourceError.rate_limited()

        run_input = parse_run_input({
            "brand": {"name": "Acme"},
            "profiles": sample_raw_profiles,
            "tiktokUsernames": ["gamma"],
        })

        creators = collect_creators(run_input)

        assert [c.username for c in creators] == ["alpha", "beta"]

    @patch("tasks.fetch.TikTokProfileClient")
    def test_missing_token_degrades(self, mock_client_class: MagicMock) -> None:
        """Test a missing token is logged and leads to no creators."""
        from tasks.fetch import collect_creators

        mock_client_class.side_effect = ProfileSourceError.token_missing()

        run_input = parse_run_input({"brand": {"name": "Acme"}, "tiktokUsernames": ["gamma"]})

        with pytest.raises(NoCreatorsError):
            collect_creators(run_input)

    def test_no_creators(self) -> None:
        """Test an empty run is fatal."""
        from tasks.fetch import collect_creators

        with pytest.raises(NoCreatorsError, match="No creators to analyze"):
            collect_creators(parse_run_input({"brand": {"name": "Acme"}}))
