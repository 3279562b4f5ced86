"""Profile source error types."""

from __future__ import annotations

from enum import StrEnum
from typing import Self


class ErrorCode(StrEnum):
    """Standardized profile source error codes."""

    TOKEN_MISSING = "TOKEN_MISSING"
    TOKEN_INVALID = "TOKEN_INVALID"
    ACTOR_NOT_FOUND = "ACTOR_NOT_FOUND"
    RATE_LIMITED = "RATE_LIMITED"
    RUN_TIMEOUT = "RUN_TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    INVALID_RESPONSE = "INVALID_RESPONSE"


class ProfileSourceError(Exception):
    """Profile fetch error with standardized error codes."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        *,
        http_status: int | None = None,
    ) -> None:
        """Initialize profile source error.

        Args:
            code: Standardized error code.
            message: Human-readable error message.
            http_status: Optional HTTP status code.
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.http_status = http_status

    def is_code(self, code: ErrorCode) -> bool:
        """Check if this error matches a specific code."""
        return self.code == code

    @classmethod
    def token_missing(cls) -> Self:
        """Create token missing error."""
        return cls(
            ErrorCode.TOKEN_MISSING,
            "APIFY_TOKEN environment variable not set and no apiToken given",
            http_status=401,
        )

    @classmethod
    def token_invalid(cls) -> Self:
        """Create invalid token error."""
        return cls(ErrorCode.TOKEN_INVALID, "Apify rejected the API token", http_status=401)

    @classmethod
    def actor_not_found(cls, actor_id: str) -> Self:
        """Create actor not found error."""
        return cls(
            ErrorCode.ACTOR_NOT_FOUND,
            f"Scraper actor not found: {actor_id}",
            http_status=404,
        )

    @classmethod
    def rate_limited(cls) -> Self:
        """Create rate limit error."""
        return cls(ErrorCode.RATE_LIMITED, "Apify rate limit exceeded", http_status=429)

    @classmethod
    def run_timeout(cls, timeout_secs: int) -> Self:
        """Create actor run timeout error."""
        return cls(
            ErrorCode.RUN_TIMEOUT,
            f"Scraper run did not finish within {timeout_secs}s",
            http_status=408,
        )

    @classmethod
    def network_error(cls, details: str) -> Self:
        """Create network error."""
        return cls(
            ErrorCode.NETWORK_ERROR,
            f"Network error: {details}",
            http_status=502,
        )

    @classmethod
    def invalid_response(cls, details: str) -> Self:
        """Create invalid response error."""
        return cls(ErrorCode.INVALID_RESPONSE, f"Invalid scraper response: {details}")
