"""Clipped line windows over source files."""

from __future__ import annotations

from collections.abc import Sequence

from corner.utils.errors import require_non_negative_int


def window_bounds(
    total_lines: int,
    target_line: int | None,
    lines_before: int,
    lines_after: int,
) -> tuple[int, int] | None:
    """Compute the 1-indexed inclusive line range around a target line.

    Args:
        total_lines: Number of lines in the file
        target_line: Line to center the window on (1-indexed)
        lines_before: Lines to include above the target
        lines_after: Lines to include below the target

    Returns:
        (start_line, end_line), or None if the window is empty

    Raises:
        InvalidArgumentError: If lines_before or lines_after is negative
    """
    require_non_negative_int("lines_before", lines_before)
    require_non_negative_int("lines_after", lines_after)

    if target_line is None:
        return None

    start_line = max(1, target_line - lines_before)
    end_line = min(total_lines, target_line + lines_after)

    if start_line > end_line:
        return None

    return start_line, end_line


def extract_window(
    lines: Sequence[str] | None,
    target_line: int | None,
    lines_before: int,
    lines_after: int,
) -> str:
    """Render the source lines around a target line as one text block.

    Lines are returned verbatim, in file order, joined with newlines; no
    numbering or highlighting is added.

    Args:
        lines: File contents split into lines, or None if unreadable
        target_line: Line to center the window on (1-indexed)
        lines_before: Lines to include above the target
        lines_after: Lines to include below the target

    Returns:
        The window's text, or "" if there is nothing to show

    Raises:
        InvalidArgumentError: If lines_before or lines_after is negative
    """
    require_non_negative_int("lines_before", lines_before)
    require_non_negative_int("lines_after", lines_after)

    if lines is None:
        return ""

    bounds = window_bounds(len(lines), target_line, lines_before, lines_after)
    if bounds is None:
        return ""

    start_line, end_line = bounds
    # Convert to 0-indexed for slicing
    return "\n".join(lines[start_line - 1 : end_line])
