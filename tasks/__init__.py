"""Orchestration around the scoring core.

This package contains the run logic for the brand compatibility CLI.
Each module handles a specific concern:

- inputs: Run input document and brand contract checks
- config: Shared pipeline configuration
- fetch: Collecting creator profiles (pre-fetched and scraped)
- evaluate: Scoring or ranking creators into output records
- output: JSON lines sink
- report: Console report
- run: CLI entry point
"""

from tasks.config import PipelineConfig, get_config

__all__ = ["PipelineConfig", "get_config"]
