"""Read-through cache of line-split source files.

A single process-wide cache is shared by every decorated error, keyed by
absolute path. Misses are serialized with a lock so that a given path is
read from disk at most once, even under contention.
"""

from __future__ import annotations

import codecs
import io
import re
import threading
import tokenize
from collections import OrderedDict
from pathlib import Path

from corner.models.snippet import CachedFile
from corner.utils.errors import SourceUnreadableError
from corner.utils.logging import LogEventNames, get_logger

log = get_logger(__name__)

_CODING_COOKIE = re.compile(rb"^[ \t\f]*#.*?coding[:=][ \t]*([-\w.]+)")


def split_source(content: str) -> tuple[str, ...]:
    """Split source text into lines the way the interpreter numbers them.

    Only ``\\n`` ends a line (``str.splitlines`` would also break on form
    feeds and other separators and shift line numbers). A final newline does
    not produce a trailing empty line.
    """
    if not content:
        return ()
    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tuple(lines)


def detect_source_encoding(raw: bytes, default: str = "utf-8") -> str:
    """Detect the encoding of source bytes the way the interpreter does.

    A UTF-8 BOM or a PEP 263 coding cookie on the first two lines wins;
    otherwise ``default`` is used.

    Args:
        raw: File contents
        default: Encoding for files that declare none

    Returns:
        Codec name to decode ``raw`` with
    """
    if raw.startswith(codecs.BOM_UTF8):
        return "utf-8-sig"

    try:
        encoding, consumed = tokenize.detect_encoding(io.BytesIO(raw).readline)
    except SyntaxError:
        # Unknown codec in the cookie, or a malformed first line
        return default

    if any(_CODING_COOKIE.match(line) for line in consumed):
        return encoding
    return default


def read_source(path: Path, encoding: str = "utf-8") -> tuple[str, ...]:
    """Read and split a source file.

    Args:
        path: Absolute path of the file
        encoding: Text encoding for files without a coding cookie or BOM;
            undecodable bytes are replaced

    Returns:
        The file's lines

    Raises:
        SourceUnreadableError: If the file is missing, not a file, or unreadable
    """
    if not path.is_file():
        raise SourceUnreadableError(f"Not a readable file: {path}")

    try:
        with path.open("rb") as f:
            raw = f.read()
    except OSError as e:
        raise SourceUnreadableError(f"Failed to read {path}: {e}") from e

    codec = detect_source_encoding(raw, encoding)
    try:
        content = raw.decode(codec, errors="replace")
    except LookupError as e:
        raise SourceUnreadableError(f"Unknown encoding {codec!r} for {path}") from e

    # Universal newlines: \r\n and \r both end a line
    return split_source(content.replace("\r\n", "\n").replace("\r", "\n"))


class SourceCache:
    """Memoizes the lines of source files.

    Unreadable paths are memoized as well, so frames without source do not
    hit the disk again on every request.

    Example:
        cache = SourceCache(max_files=256)
        lines = cache.lines_of("/app/src/main.py")
    """

    def __init__(self, max_files: int | None = None, encoding: str = "utf-8") -> None:
        """Initialize the cache.

        Args:
            max_files: Maximum number of files kept, least recently used
                evicted first. None keeps every file.
            encoding: Text encoding used to read files
        """
        self._max_files = max_files
        self._encoding = encoding
        self._cache: OrderedDict[Path, CachedFile | None] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def max_files(self) -> int | None:
        return self._max_files

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        with self._lock:
            return self._key(path) in self._cache

    def lines_of(self, path: str | Path | None) -> tuple[str, ...] | None:
        """Get the lines of a source file.

        Args:
            path: File path, or None for a frame without source

        Returns:
            The file's lines, or None if the file cannot be read
        """
        cached = self.get(path)
        return cached.lines if cached is not None else None

    def get(self, path: str | Path | None) -> CachedFile | None:
        """Get a cached file, reading it on first use.

        Args:
            path: File path, or None for a frame without source

        Returns:
            CachedFile, or None if the file cannot be read
        """
        if path is None or path == "":
            return None

        key = self._key(path)

        with self._lock:
            if key in self._cache:
                self._cache.move_to_end(key)
                log.debug(LogEventNames.CACHE_HIT, path=str(key))
                return self._cache[key]

            log.debug(LogEventNames.CACHE_MISS, path=str(key))
            try:
                entry: CachedFile | None = CachedFile(
                    path=key, lines=read_source(key, self._encoding)
                )
            except SourceUnreadableError as e:
                log.debug(LogEventNames.SOURCE_UNREADABLE, path=str(key), error=str(e))
                entry = None

            self._cache[key] = entry
            self._evict()
            return entry

    def invalidate(self, path: str | Path) -> None:
        """Drop one file from the cache so it is read again on next use.

        Args:
            path: File path to invalidate
        """
        key = self._key(path)
        with self._lock:
            self._cache.pop(key, None)
        log.debug(LogEventNames.CACHE_INVALIDATED, path=str(key))

    def clear(self) -> None:
        """Clear all cached entries."""
        with self._lock:
            self._cache.clear()
        log.debug(LogEventNames.CACHE_CLEARED)

    def _evict(self) -> None:
        # Caller holds the lock
        if self._max_files is None:
            return
        while len(self._cache) > self._max_files:
            evicted, _ = self._cache.popitem(last=False)
            log.debug(LogEventNames.CACHE_EVICTED, path=str(evicted))

    @staticmethod
    def _key(path: str | Path) -> Path:
        return Path(path).absolute()


_default_cache = SourceCache()
_default_lock = threading.Lock()


def default_cache() -> SourceCache:
    """Get the process-wide source cache."""
    return _default_cache


def set_default_cache(cache: SourceCache) -> SourceCache:
    """Replace the process-wide source cache.

    Args:
        cache: New cache instance

    Returns:
        The previous cache
    """
    global _default_cache
    with _default_lock:
        previous = _default_cache
        _default_cache = cache
    return previous
