"""Capture of the live call stack when a decorated error is built.

The runtime provider walks the interpreter's frame objects from the
current frame outward. Leading frames that belong to corner itself, or to
constructors running for the error being built, are skipped so that index
0 of the result is the line that built the error.
"""

from __future__ import annotations

import os
import sys
from types import FrameType

from corner.models.frame import CapturedStack, StackFrame, is_virtual_path
from corner.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)

DEFAULT_MAX_DEPTH = 100

_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__))) + os.sep
_CONSTRUCTOR_NAMES = frozenset({"__init__", "__new__", "__post_init__"})


def _is_internal(frame: FrameType) -> bool:
    """Check if a frame runs code from the corner package."""
    return os.path.abspath(frame.f_code.co_filename).startswith(_PACKAGE_DIR)


def _is_owner_constructor(frame: FrameType, owner: object | None) -> bool:
    """Check if a frame is a constructor running for ``owner``."""
    if owner is None or frame.f_code.co_name not in _CONSTRUCTOR_NAMES:
        return False
    f_locals = frame.f_locals
    return f_locals.get("self") is owner or f_locals.get("cls") is type(owner)


def frame_from_live(frame: FrameType) -> StackFrame:
    """Convert an interpreter frame into an immutable StackFrame."""
    code = frame.f_code
    file_path: str | None = code.co_filename
    if is_virtual_path(file_path):
        file_path = None
    else:
        file_path = os.path.abspath(code.co_filename)

    line_number = frame.f_lineno
    if line_number is not None and line_number < 1:
        line_number = None

    return StackFrame(
        file_path=file_path,
        line_number=line_number,
        function_name=code.co_qualname,
    )


class RuntimeStackProvider:
    """Captures stacks from the running interpreter.

    Example:
        provider = RuntimeStackProvider(max_depth=50)
        stack = provider.capture(owner=error)
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        """Initialize the provider.

        Args:
            max_depth: Maximum number of frames recorded per capture
        """
        self._max_depth = max_depth

    @property
    def max_depth(self) -> int:
        return self._max_depth

    def capture(self, owner: object | None = None) -> CapturedStack:
        """Capture the current call stack, innermost frame first.

        Args:
            owner: Object being constructed; its constructor frames are skipped

        Returns:
            Captured stack, or an empty stack if frames cannot be inspected
        """
        try:
            frames = self._walk(owner)
        except Exception as e:
            log.warning(
                LogEventNames.STACK_CAPTURE_UNAVAILABLE,
                error=str(e),
                error_type=type(e).__name__,
            )
            return CapturedStack()

        log.debug(LogEventNames.STACK_CAPTURED, depth=len(frames))
        return CapturedStack(frames=tuple(frames))

    def _walk(self, owner: object | None) -> list[StackFrame]:
        frame: FrameType | None = sys._getframe(1)
        frames: list[StackFrame] = []
        leading = True

        try:
            while frame is not None and len(frames) < self._max_depth:
                if leading and (_is_internal(frame) or _is_owner_constructor(frame, owner)):
                    frame = frame.f_back
                    continue
                leading = False
                frames.append(frame_from_live(frame))
                frame = frame.f_back
        finally:
            # Break the reference cycle between this frame and the walked frames
            del frame

        return frames


class StaticStackProvider:
    """Returns the same synthetic stack on every capture.

    Used to test snippet extraction independently of the real call stack.
    """

    def __init__(
        self, frames: CapturedStack | tuple[StackFrame, ...] | list[StackFrame] = ()
    ) -> None:
        """Initialize the provider.

        Args:
            frames: Frames to return, innermost first
        """
        if isinstance(frames, CapturedStack):
            self._stack = frames
        else:
            self._stack = CapturedStack(frames=tuple(frames))

    def capture(self, owner: object | None = None) -> CapturedStack:
        """Return the configured stack, ignoring the live call stack."""
        return self._stack
