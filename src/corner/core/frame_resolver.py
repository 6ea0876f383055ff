"""Selection of one frame from a captured stack."""

from __future__ import annotations

from corner.models.frame import CapturedStack, StackFrame
from corner.utils.errors import require_non_negative_int
from corner.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)


def resolve_frame(stack: CapturedStack, frame_offset: int = 0) -> StackFrame | None:
    """Pick the frame ``frame_offset`` steps out from the raise site.

    Offsets past the outermost frame are clipped to it rather than rejected,
    so callers can probe with large offsets to walk out of a library.

    Args:
        stack: Captured stack, innermost frame first
        frame_offset: 0 for the raise site, higher to walk outward

    Returns:
        The selected frame, or None if the stack is empty

    Raises:
        InvalidArgumentError: If frame_offset is negative or not an integer
    """
    require_non_negative_int("frame_offset", frame_offset)

    if not len(stack):
        return None

    if frame_offset >= len(stack):
        log.debug(
            LogEventNames.FRAME_OUT_OF_RANGE,
            frame_offset=frame_offset,
            depth=len(stack),
        )
        return stack[len(stack) - 1]

    frame = stack[frame_offset]
    log.debug(
        LogEventNames.FRAME_RESOLVED,
        frame_offset=frame_offset,
        file_path=frame.file_path,
        line_number=frame.line_number,
    )
    return frame
