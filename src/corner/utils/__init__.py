"""Utility functions and helpers.

This module provides:
- errors: Exceptions surfaced to callers and argument validation
- logging: Structured logging configuration
"""

from corner.utils.errors import (
    ConfigError,
    CornerUsageError,
    InvalidArgumentError,
    SourceUnreadableError,
    require_non_negative_int,
)
from corner.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)

__all__ = [
    # Errors
    "ConfigError",
    "CornerUsageError",
    "InvalidArgumentError",
    "SourceUnreadableError",
    "require_non_negative_int",
    # Logging
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "unbind_context",
]
