"""
Structured logging setup (structlog).

The library itself only calls ``structlog.get_logger(__name__)``; applications
call :func:`configure_logging` once at startup to choose level and renderer.

Environment:
    ETHVERIFY_LOG_LEVEL: DEBUG, INFO (default), WARNING, ERROR.
    ETHVERIFY_LOG_FORMAT: "console" (default) or "json".
"""

from __future__ import annotations

import logging
import os

import structlog
from structlog.typing import Processor

LOG_LEVEL_ENV = "ETHVERIFY_LOG_LEVEL"
LOG_FORMAT_ENV = "ETHVERIFY_LOG_FORMAT"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "console"


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    value = logging.getLevelName(name)
    return value if isinstance(value, int) else logging.INFO


def _resolve_format(fmt: str | None) -> str:
    value = (fmt or os.getenv(LOG_FORMAT_ENV, DEFAULT_LOG_FORMAT)).lower()
    if value not in ("console", "json"):
        raise ValueError(f"unknown log format: {value!r}")
    return value


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog for the process.

    Args:
        level: Log level name; falls back to $ETHVERIFY_LOG_LEVEL, then INFO.
        fmt: "console" or "json"; falls back to $ETHVERIFY_LOG_FORMAT, then console.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if _resolve_format(fmt) == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


__all__: tuple[str, ...] = (
    "DEFAULT_LOG_FORMAT",
    "DEFAULT_LOG_LEVEL",
    "LOG_FORMAT_ENV",
    "LOG_LEVEL_ENV",
    "configure_logging",
)
