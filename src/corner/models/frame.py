"""Data models for captured call stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


def is_virtual_path(file_path: str | None) -> bool:
    """Check if a code filename names no real file.

    The interpreter uses angle-bracketed pseudo names for code that has
    no file on disk: ``<string>``, ``<stdin>``, ``<frozen importlib._bootstrap>``.
    """
    if not file_path:
        return True
    return file_path.startswith("<") and file_path.endswith(">")


@dataclass(frozen=True)
class StackFrame:
    """A single frame in a captured call stack."""

    file_path: str | None
    line_number: int | None
    function_name: str = "<unknown>"

    @property
    def has_source(self) -> bool:
        """Check if this frame points at a readable source location."""
        return (
            not is_virtual_path(self.file_path)
            and self.line_number is not None
            and self.line_number >= 1
        )

    def __str__(self) -> str:
        location = self.file_path or "<unknown>"
        if self.line_number is not None:
            location = f"{location}:{self.line_number}"
        return f"{location} in {self.function_name}"


@dataclass(frozen=True)
class CapturedStack:
    """An immutable call stack, innermost frame first.

    Index 0 is the frame where the error was raised; higher indexes walk
    toward outer callers.
    """

    frames: tuple[StackFrame, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.frames)

    def __iter__(self) -> Iterator[StackFrame]:
        return iter(self.frames)

    def __getitem__(self, index: int) -> StackFrame:
        return self.frames[index]

    @property
    def innermost(self) -> StackFrame | None:
        """The frame where the error was raised, if any was captured."""
        return self.frames[0] if self.frames else None

    @property
    def outermost(self) -> StackFrame | None:
        """The outermost captured caller, if any was captured."""
        return self.frames[-1] if self.frames else None
