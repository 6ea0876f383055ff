"""Data models for snippet requests, cached sources and decorations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

from ..utils.errors import InvalidArgumentError, require_non_negative_int


@dataclass(frozen=True)
class SnippetRequest:
    """How much source to show around which frame."""

    lines_before: int
    lines_after: int
    frame_offset: int = 0

    def __post_init__(self) -> None:
        require_non_negative_int("lines_before", self.lines_before)
        require_non_negative_int("lines_after", self.lines_after)
        require_non_negative_int("frame_offset", self.frame_offset)

    @property
    def max_lines(self) -> int:
        """Upper bound on the number of lines a snippet can contain."""
        return self.lines_before + self.lines_after + 1


@dataclass(frozen=True)
class CachedFile:
    """Line-split contents of one source file."""

    path: Path
    lines: tuple[str, ...]

    @property
    def line_count(self) -> int:
        """Number of lines in the file."""
        return len(self.lines)


def is_http_url(value: str) -> bool:
    """Check that a string is an absolute http(s) URL."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass(frozen=True)
class Decoration:
    """Fixed helpful message and support link of an error variant."""

    helpful_message: str
    support_link: str

    def __post_init__(self) -> None:
        if not isinstance(self.helpful_message, str) or not self.helpful_message.strip():
            raise InvalidArgumentError("helpful_message must be a non-empty string")
        if not isinstance(self.support_link, str) or not is_http_url(self.support_link):
            raise InvalidArgumentError(
                f"support_link must be an http(s) URL, got {self.support_link!r}"
            )
