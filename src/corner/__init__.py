"""Decorated exceptions with helpful messages, support links and source snippets."""

from corner._version import __version__
from corner.core import (
    VARIANTS,
    Corner,
    CornerError,
    DecorationRegistry,
    RuntimeStackProvider,
    SnippetExtractor,
    SourceCache,
    StaticStackProvider,
    default_cache,
    extract_window,
    get_stack_provider,
    resolve_frame,
    set_stack_provider,
    window_bounds,
)
from corner.interfaces import CornerInterface, StackProvider
from corner.models import CachedFile, CapturedStack, Decoration, SnippetRequest, StackFrame
from corner.utils.errors import ConfigError, CornerUsageError, InvalidArgumentError

__all__ = [
    "VARIANTS",
    "CachedFile",
    "CapturedStack",
    "ConfigError",
    "Corner",
    "CornerError",
    "CornerInterface",
    "CornerUsageError",
    "Decoration",
    "DecorationRegistry",
    "InvalidArgumentError",
    "RuntimeStackProvider",
    "SnippetExtractor",
    "SnippetRequest",
    "SourceCache",
    "StackFrame",
    "StackProvider",
    "StaticStackProvider",
    "__version__",
    "default_cache",
    "extract_window",
    "get_stack_provider",
    "resolve_frame",
    "set_stack_provider",
    "window_bounds",
]
