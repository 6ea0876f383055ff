"""Structured logging configuration.

corner is a library, so it never configures logging on import. Library
modules only call :func:`get_logger`; applications (the ``python -m corner``
entry point, or :func:`corner.config.apply_config` with a ``logging``
section) call :func:`configure_logging` to choose:
- Log level and output format (JSON/console)
- Context injection for correlation
- Optional file output
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from enum import StrEnum
from pathlib import Path
from typing import Any, cast

import structlog
from structlog.typing import WrappedLogger


class LogFormat(StrEnum):
    """Log output format options."""

    JSON = "json"
    CONSOLE = "console"


class LogLevel(StrEnum):
    """Log level options."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def add_context_processor(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Add library name and version to all log entries.

    Args:
        logger: Logger instance (unused)
        method_name: Log method name (unused)
        event_dict: Event dictionary to process

    Returns:
        Event dictionary with added context
    """
    event_dict["library"] = "corner"

    try:
        from corner._version import __version__

        event_dict["version"] = __version__
    except ImportError:
        pass

    return event_dict


def configure_logging(
    level: LogLevel | str = LogLevel.INFO,
    log_format: LogFormat | str = LogFormat.CONSOLE,
    file_path: Path | str | None = None,
    file_enabled: bool = False,
) -> None:
    """Configure structured logging for an application using corner.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format (json or console)
        file_path: Path to log file (if file logging enabled)
        file_enabled: Whether to enable file logging

    Example:
        configure_logging(level="DEBUG", log_format="console")
    """
    if isinstance(level, str):
        level = LogLevel(level.upper())
    if isinstance(log_format, str):
        log_format = LogFormat(log_format.lower())

    numeric_level = getattr(logging, level.value)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        add_context_processor,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == LogFormat.JSON:
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(
                colors=False, exception_formatter=structlog.dev.plain_traceback
            )
        )

    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    handlers.append(console_handler)

    if file_enabled and file_path:
        try:
            file_path = Path(file_path)
            file_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(file_path)
            file_handler.setLevel(numeric_level)
            handlers.append(file_handler)
        except OSError as e:
            # Continue with console only
            console_logger = logging.getLogger("corner.logging")
            console_logger.warning(f"Could not create log file {file_path}: {e}")

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )


def get_logger(name: str | None = None) -> WrappedLogger:
    """Get a structured logger backed by a standard library logger.

    Events pass through the stdlib logger ``name``, so they stay silent
    (below WARNING) until the application configures logging.

    Args:
        name: Logger name (defaults to "corner")

    Returns:
        Lazily configured structlog logger
    """
    return cast(
        WrappedLogger,
        structlog.wrap_logger(
            logging.getLogger(name or "corner"),
            wrapper_class=structlog.stdlib.BoundLogger,
        ),
    )


def bind_context(**kwargs: Any) -> None:
    """Bind contextual variables for all subsequent log calls.

    Args:
        **kwargs: Key-value pairs to bind

    Example:
        bind_context(request_id="r-123")
        log.info("snippet_extracted")  # Includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove contextual variables.

    Args:
        *keys: Keys to unbind
    """
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all bound contextual variables."""
    structlog.contextvars.clear_contextvars()


class LogEventNames:
    """Standard log event names used across corner."""

    # Stack capture
    STACK_CAPTURED = "stack_captured"
    STACK_CAPTURE_UNAVAILABLE = "stack_capture_unavailable"

    # Frame resolution
    FRAME_RESOLVED = "frame_resolved"
    FRAME_OUT_OF_RANGE = "frame_out_of_range"
    FRAME_WITHOUT_SOURCE = "frame_without_source"

    # Source cache
    CACHE_HIT = "cache_hit"
    CACHE_MISS = "cache_miss"
    CACHE_EVICTED = "cache_evicted"
    CACHE_INVALIDATED = "cache_invalidated"
    CACHE_CLEARED = "cache_cleared"
    SOURCE_UNREADABLE = "source_unreadable"

    # Snippets
    SNIPPET_EXTRACTED = "snippet_extracted"
    SNIPPET_EMPTY = "snippet_empty"

    # Decoration
    VARIANT_REGISTERED = "variant_registered"
    VARIANT_NOT_REGISTERED = "variant_not_registered"

    # Configuration
    CONFIG_LOADED = "config_loaded"
    CONFIG_APPLIED = "config_applied"
