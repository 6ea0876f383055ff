"""Snippet extraction from captured stacks.

Ties the pieces together for one request:
- Frame resolution (which frame of the stack)
- Source lookup through the shared cache
- Window extraction around the frame's line
"""

from __future__ import annotations

from corner.core.frame_resolver import resolve_frame
from corner.core.source_cache import SourceCache, default_cache
from corner.core.window_extractor import extract_window
from corner.models.frame import CapturedStack
from corner.models.snippet import SnippetRequest
from corner.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)


class SnippetExtractor:
    """Extracts source snippets for frames of a captured stack.

    Missing source is a normal outcome and yields an empty string; only
    malformed requests raise.

    Example:
        extractor = SnippetExtractor()
        text = extractor.extract(stack, SnippetRequest(2, 2, frame_offset=1))
    """

    def __init__(self, cache: SourceCache | None = None) -> None:
        """Initialize the extractor.

        Args:
            cache: Source cache to read through. Defaults to the
                process-wide cache, looked up on every request.
        """
        self._cache = cache

    @property
    def cache(self) -> SourceCache:
        return self._cache if self._cache is not None else default_cache()

    def extract(self, stack: CapturedStack, request: SnippetRequest) -> str:
        """Extract the snippet described by ``request`` from ``stack``.

        Args:
            stack: Captured stack, innermost frame first
            request: Validated snippet request

        Returns:
            The source window, or "" if the frame has no readable source
        """
        frame = resolve_frame(stack, request.frame_offset)
        if frame is None:
            log.debug(LogEventNames.SNIPPET_EMPTY, reason="empty_stack")
            return ""

        if not frame.has_source:
            log.debug(
                LogEventNames.FRAME_WITHOUT_SOURCE,
                function_name=frame.function_name,
                frame_offset=request.frame_offset,
            )
            return ""

        lines = self.cache.lines_of(frame.file_path)
        if lines is None:
            log.debug(
                LogEventNames.SNIPPET_EMPTY,
                reason="source_unreadable",
                file_path=frame.file_path,
            )
            return ""

        snippet = extract_window(
            lines,
            frame.line_number,
            request.lines_before,
            request.lines_after,
        )

        log.debug(
            LogEventNames.SNIPPET_EXTRACTED,
            file_path=frame.file_path,
            line_number=frame.line_number,
            frame_offset=request.frame_offset,
            lines_before=request.lines_before,
            lines_after=request.lines_after,
        )
        return snippet
