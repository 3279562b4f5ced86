"""Command line entry point.

Usage:
    brand-compat input.json
    brand-compat input.json --output results.jsonl --quiet
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from compat_utils import get_logger
from rich.console import Console

from tasks.config import get_config
from tasks.errors import RunInputError
from tasks.evaluate import RankingReport, run_pipeline
from tasks.fetch import collect_creators
from tasks.inputs import load_run_input
from tasks.output import write_records
from tasks.report import render

log = get_logger("tasks.run")

EXIT_OUTPUT_ERROR = 1
EXIT_INPUT_ERROR = 2


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Score creators for brand compatibility",
    )
    parser.add_argument("input", type=Path, help="Run input JSON file")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON lines here (default: stdout)",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Skip the console report",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run a scoring job and return the process exit code."""
    args = _parse_args(argv)
    config = get_config()

    try:
        run_input = load_run_input(args.input)
        creators = collect_creators(run_input, config)
    except RunInputError as e:
        log.error("run_aborted", error=str(e))
        return EXIT_INPUT_ERROR

    output = run_pipeline(run_input, creators, config=config)

    if isinstance(output, RankingReport):
        records = [output.to_record()]
    else:
        records = [report.to_record() for report in output]
    try:
        write_records(records, args.output)
    except OSError as e:
        log.error("run_aborted", error=str(e), output=str(args.output))
        return EXIT_OUTPUT_ERROR

    if not args.quiet:
        # stderr when results go to stdout, so the JSON stream stays clean
        console = Console(stderr=args.output is None)
        render(output, console, findings_limit=config.report_findings_limit)

    return 0


if __name__ == "__main__":
    sys.exit(main())
