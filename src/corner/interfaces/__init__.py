"""Protocol definitions for pluggable components."""

from .corner import CornerInterface
from .stack import StackProvider

__all__ = ["CornerInterface", "StackProvider"]
