"""Tests for the command line entry point."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from tasks.run import EXIT_INPUT_ERROR, EXIT_OUTPUT_ERROR, main


def _write_input(tmp_path: Path, data: dict) -> Path:
    path = tmp_path / "input.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestMain:
    """Tests for main."""

    def test_individual_run(self, tmp_path: Path, sample_raw_profiles: list[dict]) -> None:
        """Test scoring pre-fetched profiles into a JSON lines file."""
        input_path = _write_input(tmp_path, {
            "brand": {"category": "technology", "targetTier": "micro"},
            "profiles": sample_raw_profiles,
            "fetchProfiles": False,
        })
        output_path = tmp_path / "out" / "results.jsonl"

        exit_code = main([str(input_path), "--output", str(output_path), "--quiet"])

        assert exit_code == 0
        lines = output_path.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in lines]
        assert [r["username"] for r in records] == ["alpha", "beta"]
        assert all("compatibility" in r for r in records)

    def test_ranking_run(self, tmp_path: Path, sample_raw_profiles: list[dict]) -> None:
        """Test rank mode writes a single ranking record."""
        input_path = _write_input(tmp_path, {
            "brand": {"name": "Acme", "category": "technology"},
            "profiles": sample_raw_profiles,
            "fetchProfiles": False,
            "rankMode": True,
        })
        output_path = tmp_path / "ranking.jsonl"

        exit_code = main([str(input_path), "--output", str(output_path), "--quiet"])

        assert exit_code == 0
        records = [json.loads(line) for line in output_path.read_text().splitlines()]
        assert len(records) == 1
        assert records[0]["type"] == "ranking"
        assert records[0]["topPick"]["username"] == "alpha"

    def test_stdout_with_report(
        self,
        tmp_path: Path,
        sample_raw_profiles: list[dict],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test records go to stdout and the report to stderr."""
        input_path = _write_input(tmp_path, {
            "brand": {"name": "Acme", "category": "technology"},
            "profiles": sample_raw_profiles,
            "fetchProfiles": False,
            "rankMode": True,
        })

        exit_code = main([str(input_path)])

        captured = capsys.readouterr()
        assert exit_code == 0
        assert json.loads(captured.out)["type"] == "ranking"
        assert "alpha" in captured.err

    def test_brand_without_identity(self, tmp_path: Path) -> None:
        """Test a brand without category or name aborts the run."""
        input_path = _write_input(tmp_path, {"brand": {}, "profiles": [{"username": "a"}]})

        assert main([str(input_path), "--quiet"]) == EXIT_INPUT_ERROR

    def test_no_creators(self, tmp_path: Path) -> None:
        """Test an empty creator list aborts the run."""
        input_path = _write_input(tmp_path, {"brand": {"name": "Acme"}, "fetchProfiles": False})

        assert main([str(input_path), "--quiet"]) == EXIT_INPUT_ERROR

    def test_null_record_does_not_stop_batch(self, tmp_path: Path) -> None:
        """Test a null profile is reported as invalid while the rest are scored."""
        input_path = _write_input(tmp_path, {
            "brand": {"category": "technology"},
            "profiles": [
                {"username": "ok", "followers": 25000, "engagementRate": 6.0},
                None,
            ],
            "fetchProfiles": False,
        })
        output_path = tmp_path / "results.jsonl"

        exit_code = main([str(input_path), "--output", str(output_path), "--quiet"])

        assert exit_code == 0
        records = [json.loads(line) for line in output_path.read_text().splitlines()]
        assert len(records) == 2
        assert records[0]["username"] == "ok"
        assert records[0]["compatibility"]["rating"]["label"] != "Invalid Data"
        assert records[1]["username"] is None
        assert records[1]["compatibility"]["rating"]["label"] == "Invalid Data"
        assert records[1]["compatibility"]["flags"] == ["Creator data is missing"]

    def test_null_record_in_ranking(self, tmp_path: Path, sample_raw_profiles: list[dict]) -> None:
        """Test a null profile ranks last with a zero score."""
        input_path = _write_input(tmp_path, {
            "brand": {"name": "Acme", "category": "technology"},
            "profiles": [None, *sample_raw_profiles],
            "fetchProfiles": False,
            "rankMode": True,
        })
        output_path = tmp_path / "ranking.jsonl"

        exit_code = main([str(input_path), "--output", str(output_path), "--quiet"])

        assert exit_code == 0
        ranking = json.loads(output_path.read_text())
        assert len(ranking["rankedCreators"]) == 3
        assert ranking["rankedCreators"][-1]["overallScore"] == 0
        assert ranking["rankedCreators"][-1]["rating"]["label"] == "Invalid Data"

    def test_unwritable_output(self, tmp_path: Path, sample_raw_profiles: list[dict]) -> None:
        """Test an output path that cannot be written ends the run with an error code."""
        input_path = _write_input(tmp_path, {
            "brand": {"category": "technology"},
            "profiles": sample_raw_profiles,
            "fetchProfiles": False,
        })
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        exit_code = main([str(input_path), "--output", str(blocker / "out.jsonl"), "--quiet"])

        assert exit_code == EXIT_OUTPUT_ERROR
