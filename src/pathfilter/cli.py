"""CLI entry point for pathfilter — I/O boundary only."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable

from pathfilter import PathFilterError
from pathfilter.filter import PatternFilter, compile
from pathfilter.groups import DEFAULT_ALLOWED_GROUP, PATTERN_GROUPS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``pathfilter`` command.
    """
    parser = argparse.ArgumentParser(
        prog="pathfilter",
        description="print the paths selected by allow/exclude glob patterns",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        help="Paths to test (default: read one path per line from stdin)",
    )
    parser.add_argument(
        "-i",
        "--include",
        action="append",
        default=[],
        dest="include",
        help=(
            "Allow paths matching pattern (can be specified multiple times, "
            f"default: {DEFAULT_ALLOWED_GROUP})"
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        dest="exclude",
        help="Exclude paths matching pattern (can be specified multiple times)",
    )
    parser.add_argument(
        "--excluded",
        action="store_true",
        dest="show_excluded",
        help="Print excluded paths instead of allowed ones",
    )
    parser.add_argument(
        "--list-groups",
        action="store_true",
        dest="list_groups",
        help="List the named pattern groups and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    return parser


def run_pathfilter(
    argv: list[str] | None = None, stdin_lines: Iterable[str] | None = None
) -> str:
    """Run pathfilter with provided CLI args and return formatted output.

    This function is side-effect free and is the primary test target for
    CLI behavior.

    Args:
        argv: Command-line argument list without program name.
        stdin_lines: Lines to read paths from when no positional path is
            given.

    Returns:
        str: Selected paths, one per line.

    Raises:
        PathFilterError: If a pattern is invalid.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args, stdin_lines or ())


def _read_paths(lines: Iterable[str]) -> list[str]:
    """Strip line endings and drop blank lines."""
    paths: list[str] = []
    for line in lines:
        path = line.rstrip("\r\n")
        if path:
            paths.append(path)
    return paths


def _format_groups() -> str:
    return "\n".join(
        f"{name}: {' '.join(patterns)}" for name, patterns in PATTERN_GROUPS.items()
    )


def _select(
    path_filter: PatternFilter, paths: list[str], show_excluded: bool
) -> list[str]:
    query = path_filter.is_excluded if show_excluded else path_filter.is_allowed
    return [path for path in paths if query(path)]


def _run_with_args(args: argparse.Namespace, stdin_lines: Iterable[str]) -> str:
    """Compile the filter for parsed arguments and select paths.

    Args:
        args: Parsed CLI namespace.
        stdin_lines: Fallback path source.

    Returns:
        str: Rendered output.

    Raises:
        PathFilterError: If a pattern is invalid.
    """
    if args.list_groups:
        return _format_groups()

    path_filter = compile(args.include, args.exclude)
    paths = list(args.paths) if args.paths else _read_paths(stdin_lines)
    selected = _select(path_filter, paths, args.show_excluded)
    logger.debug("Selected %d of %d paths", len(selected), len(paths))
    return "\n".join(selected)


def main() -> None:
    """Run the CLI entry point with process arguments.

    Exits with code 1 on invalid patterns.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        output = _run_with_args(args, sys.stdin)
    except PathFilterError as exc:
        sys.stderr.write(f"pathfilter: {exc}\n")
        sys.exit(1)

    if output:
        sys.stdout.write(output + "\n")
