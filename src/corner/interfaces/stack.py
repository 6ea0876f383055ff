"""Abstract interface for call stack capture."""

from typing import Protocol

from ..models.frame import CapturedStack


class StackProvider(Protocol):
    """Source of captured call stacks.

    The default implementation inspects the interpreter's live frames.
    Tests inject providers that return synthetic stacks.
    """

    def capture(self, owner: object | None = None) -> CapturedStack:
        """
        Capture the call stack at the current point of execution.

        Args:
            owner: Object whose construction triggered the capture. Frames
                belonging to its constructors are left out so that index 0
                is the line that built it.

        Returns:
            The captured stack, innermost frame first. Empty if the
            stack cannot be inspected.
        """
        ...
