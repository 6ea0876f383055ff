"""Exceptions raised by corner itself.

Only malformed caller input and broken configuration surface as
exceptions. Stack and file introspection failures are absorbed where they
happen and show up as empty snippets plus a log event.
"""

from __future__ import annotations


class CornerUsageError(Exception):
    """Base exception for errors caused by how corner is used."""


class InvalidArgumentError(CornerUsageError, ValueError):
    """A snippet request or decoration value is malformed."""


class ConfigError(CornerUsageError):
    """Configuration could not be loaded or validated."""


class SourceUnreadableError(OSError):
    """A source file referenced by a frame cannot be read.

    Raised by the low-level reader and always handled by the source cache.
    """


def require_non_negative_int(name: str, value: object) -> int:
    """Validate that ``value`` is a non-negative integer.

    Args:
        name: Argument name used in the error message
        value: Value to check

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If the value is not an int or is negative
    """
    # bool is an int subclass but never a meaningful line count
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgumentError(f"{name} must be >= 0, got {value}")
    return value
