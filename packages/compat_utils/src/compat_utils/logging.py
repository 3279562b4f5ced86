"""Structured logging with structlog.

In production:
- Routes logs through Python's standard logging module
- JSON format for structured log aggregation

In development:
- Uses structlog's colorized console output

Both write to stderr; stdout is reserved for the JSON-lines result sink.
"""

from __future__ import annotations

import logging
import sys
from functools import lru_cache
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger


def _get_production_processors() -> list[structlog.types.Processor]:
    """Get processors for the production environment.

    Routes structlog output through Python's logging module so the
    host's handlers capture it.
    """
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _get_dev_processors() -> list[structlog.types.Processor]:
    """Get processors for development environment."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.ConsoleRenderer(colors=True),
    ]


def _configure_stdlib_logging(log_level: int) -> None:
    """Configure Python's standard logging with a JSON formatter."""
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.processors.JSONRenderer(),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    # Only add handler if not already configured (the host may have its own)
    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        root_logger.addHandler(handler)
    root_logger.setLevel(log_level)


@lru_cache(maxsize=1)
def _configure_logging(*, is_production: bool, min_level: int) -> None:
    """Configure structlog for the application.

    Args:
        is_production: Route through stdlib logging with JSON output.
        min_level: Lowest stdlib level that is emitted.
    """
    if is_production:
        _configure_stdlib_logging(min_level)

        structlog.configure(
            processors=_get_production_processors(),
            wrapper_class=structlog.stdlib.BoundLogger,
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )
    else:
        structlog.configure(
            processors=_get_dev_processors(),
            wrapper_class=structlog.make_filtering_bound_logger(min_level),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
            cache_logger_on_first_use=True,
        )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a logger for a specific module/service.

    Args:
        name: Logger name (typically module name like "compat_scoring.ranking").

    Returns:
        Configured structlog logger with service context.

    Example:
        >>> log = get_logger("tasks.fetch")
        >>> log.info("profiles_fetched", requested=5, received=4)
    """
    from compat_utils.settings import get_settings

    settings = get_settings()
    _configure_logging(is_production=settings.is_production, min_level=settings.min_log_level)

    return structlog.get_logger(service=name)
