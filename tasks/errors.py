"""Fatal run errors raised before any creator is scored."""

from __future__ import annotations


class RunInputError(Exception):
    """The run cannot proceed with the given input."""


class NoCreatorsError(RunInputError):
    """Neither pre-fetched nor scraped profiles are available."""

    def __init__(self) -> None:
        """Initialize with the standard message."""
        super().__init__(
            "No creators to analyze. Provide tiktokUsernames or pre-fetched profiles."
        )
