"""Command line entry point for corner.

Provides two debugging helpers:
- snippet: print the source window around a file and line
- variants: validate a variant table and list its decorations
"""

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog

from corner._version import __version__

log = structlog.get_logger()


def setup_logging(debug: bool = False, log_format: str = "console") -> None:
    """Configure structured logging for the CLI.

    Args:
        debug: Enable debug logging if True
        log_format: Output format ("json" or "console")
    """
    from corner.utils.logging import LogFormat, LogLevel, configure_logging

    level = LogLevel.DEBUG if debug else LogLevel.WARNING
    configure_logging(level=level, log_format=LogFormat(log_format.lower()))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Arguments to parse (defaults to sys.argv)

    Returns:
        Parsed argument namespace
    """
    parser = argparse.ArgumentParser(
        prog="corner",
        description="corner - source snippets and helpful messages for errors",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--format",
        choices=["json", "console"],
        default="console",
        help="Log output format (default: console)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    snippet = subparsers.add_parser("snippet", help="Print source lines around a line")
    snippet.add_argument("file", type=Path, help="Source file")
    snippet.add_argument("line", type=int, help="Target line (1-indexed)")
    snippet.add_argument("-B", "--before", type=int, default=3, help="Lines before (default: 3)")
    snippet.add_argument("-A", "--after", type=int, default=3, help="Lines after (default: 3)")

    variants = subparsers.add_parser("variants", help="Validate and list a variant table")
    variants.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("corner.yaml"),
        help="Path to configuration file (default: corner.yaml)",
    )

    return parser.parse_args(argv)


def run_snippet(file: Path, line: int, before: int, after: int) -> int:
    """Print the window around ``line`` of ``file``.

    Returns:
        Exit code (0 for success, 1 if the file is unreadable, 2 on bad arguments)
    """
    from corner.core.source_cache import default_cache
    from corner.core.window_extractor import extract_window
    from corner.utils.errors import InvalidArgumentError

    if line < 1:
        log.error("invalid_argument", error=f"line must be >= 1, got {line}")
        return 2

    lines = default_cache().lines_of(file)
    if lines is None:
        log.error("source_unreadable", path=str(file))
        return 1

    try:
        print(extract_window(lines, line, before, after))
    except InvalidArgumentError as e:
        log.error("invalid_argument", error=str(e))
        return 2

    return 0


def run_variants(config_path: Path) -> int:
    """Validate a configuration file and print its variant table.

    Returns:
        Exit code (0 for success, 1 for configuration errors)
    """
    from corner.config.loader import load_config
    from corner.utils.errors import ConfigError

    try:
        config = load_config(config_path)
    except ConfigError as e:
        log.error("configuration_invalid", path=str(config_path), error=str(e))
        return 1

    for variant, entry in sorted(config.variants.items()):
        print(f"{variant}\t{entry.support_link}\t{entry.helpful_message}")

    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    setup_logging(debug=args.debug, log_format=args.format)

    if args.command == "snippet":
        return run_snippet(args.file, args.line, args.before, args.after)
    return run_variants(args.config)


if __name__ == "__main__":
    sys.exit(main())
