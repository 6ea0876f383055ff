"""Core components.

This module exports:
- Corner / CornerError: Decorated exception bases
- DecorationRegistry: Variant tag to decoration table
- RuntimeStackProvider / StaticStackProvider: Stack capture
- SourceCache: Shared read-through cache of source files
- SnippetExtractor: Frame resolution plus window extraction
"""

from corner.core.decoration import Corner, CornerError, get_stack_provider, set_stack_provider
from corner.core.frame_resolver import resolve_frame
from corner.core.registry import VARIANTS, DecorationRegistry
from corner.core.snippet import SnippetExtractor
from corner.core.source_cache import SourceCache, default_cache, set_default_cache
from corner.core.stack_capture import RuntimeStackProvider, StaticStackProvider
from corner.core.window_extractor import extract_window, window_bounds

__all__ = [
    "VARIANTS",
    "Corner",
    "CornerError",
    "DecorationRegistry",
    "RuntimeStackProvider",
    "SnippetExtractor",
    "SourceCache",
    "StaticStackProvider",
    "default_cache",
    "extract_window",
    "get_stack_provider",
    "resolve_frame",
    "set_default_cache",
    "set_stack_provider",
    "window_bounds",
]
