"""Abstract interface for decorated errors."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CornerInterface(Protocol):
    """Capability set shared by every decorated error.

    Any object providing these four methods can be treated as a decorated
    error, whichever exception base it derives from.
    """

    def get_message(self) -> str:
        """Return the error's own message, unchanged."""
        ...

    def get_helpful_message(self) -> str:
        """Return the fixed, non-empty helpful message of the variant."""
        ...

    def get_support_link(self) -> str:
        """Return the fixed support link of the variant."""
        ...

    def get_snippet(self, lines_before: int, lines_after: int, frame_offset: int = 0) -> str:
        """
        Return source lines around a frame of the captured stack.

        Args:
            lines_before: Lines to include above the frame's line
            lines_after: Lines to include below the frame's line
            frame_offset: 0 for the raise site, higher to walk outward

        Returns:
            The source window, or "" when no source is available

        Raises:
            InvalidArgumentError: If any argument is negative
        """
        ...
