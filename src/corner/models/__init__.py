"""Data models and value objects."""

from .frame import CapturedStack, StackFrame, is_virtual_path
from .snippet import CachedFile, Decoration, SnippetRequest

__all__ = [
    # Stack models
    "StackFrame",
    "CapturedStack",
    "is_virtual_path",
    # Snippet models
    "SnippetRequest",
    "CachedFile",
    "Decoration",
]
