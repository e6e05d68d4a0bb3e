"""Path filtering: allowed/excluded glob lists where exclusion always wins."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pathfilter import InvalidPatternError
from pathfilter.glob import GlobPattern, GlobSyntaxError, compile_glob
from pathfilter.groups import DEFAULT_ALLOWED_GROUP, get_group_patterns, is_group_token

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PatternFilter:
    """Compiled allow/exclude filter.

    Built by ``compile`` or ``must_compile``. Instances are immutable and
    may be queried from any number of threads.

    Attributes:
        allowed: Compiled allowed patterns. Never empty.
        excluded: Compiled excluded patterns. Empty excludes nothing.
    """

    allowed: tuple[GlobPattern, ...]
    excluded: tuple[GlobPattern, ...] = ()

    def __post_init__(self) -> None:
        if not self.allowed:
            raise ValueError("PatternFilter requires at least one allowed pattern")

    @property
    def allowed_patterns(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self.allowed)

    @property
    def excluded_patterns(self) -> tuple[str, ...]:
        return tuple(p.pattern for p in self.excluded)

    def is_allowed(self, path: str) -> bool:
        """Return whether *path* should be processed.

        A path is allowed when it matches an allowed pattern and matches no
        excluded pattern.

        Args:
            path: Path string, with ``/`` separators.

        Returns:
            bool: ``True`` when the path is allowed.
        """
        return match_any(self.allowed, path) and not self.is_excluded(path)

    def is_excluded(self, path: str) -> bool:
        """Return whether *path* matches an excluded pattern.

        Useful for skipping whole directories during a walk without
        evaluating the allowed patterns.

        Args:
            path: Path string, with ``/`` separators.

        Returns:
            bool: ``True`` when any excluded pattern matches.
        """
        return match_any(self.excluded, path)


def match_any(patterns: Sequence[GlobPattern], path: str) -> bool:
    """Return ``True`` on the first pattern in *patterns* that matches *path*."""
    for pattern in patterns:
        if pattern.matches(path):
            return True
    return False


def translate_patterns(patterns: Iterable[str] | None) -> list[str]:
    """Expand named group tokens in place, keeping the order of *patterns*.

    Strings that are not group tokens pass through unchanged.

    Args:
        patterns: Raw pattern strings, possibly containing group tokens.

    Returns:
        list[str]: Flat pattern list without group tokens.
    """
    translated: list[str] = []
    for pattern in patterns or ():
        if is_group_token(pattern):
            group = get_group_patterns(pattern)
            logger.debug("Expanding %s into %d patterns", pattern, len(group))
            translated.extend(group)
        else:
            translated.append(pattern)
    return translated


def validate_patterns(
    patterns: Iterable[str], list_name: str
) -> tuple[GlobPattern, ...]:
    """Compile every pattern, stopping at the first malformed one.

    Args:
        patterns: Translated pattern strings.
        list_name: ``"allowed"`` or ``"excluded"``, used in the error.

    Returns:
        tuple[GlobPattern, ...]: Compiled patterns in input order.

    Raises:
        InvalidPatternError: If a pattern is malformed.
    """
    compiled: list[GlobPattern] = []
    for pattern in patterns:
        try:
            compiled.append(compile_glob(pattern))
        except GlobSyntaxError as exc:
            raise InvalidPatternError(list_name, pattern, exc) from exc
    return tuple(compiled)


def compile(
    allowed: Iterable[str] | None = None,
    excluded: Iterable[str] | None = None,
) -> PatternFilter:
    """Compile allowed and excluded pattern lists into a filter.

    Group tokens are expanded in both lists. An empty allowed list is
    replaced by the ``_IMAGE_EXTENSIONS_`` group.

    Args:
        allowed: Allowed patterns.
        excluded: Excluded patterns.

    Returns:
        PatternFilter: Ready-to-query filter.

    Raises:
        InvalidPatternError: If a pattern in either list is malformed.
    """
    allowed_list = translate_patterns(allowed)
    excluded_list = translate_patterns(excluded)

    if not allowed_list:
        logger.debug("No allowed patterns, using %s", DEFAULT_ALLOWED_GROUP)
        allowed_list = list(get_group_patterns(DEFAULT_ALLOWED_GROUP))

    path_filter = PatternFilter(
        allowed=validate_patterns(allowed_list, "allowed"),
        excluded=validate_patterns(excluded_list, "excluded"),
    )
    logger.debug(
        "Compiled filter: %d allowed, %d excluded patterns",
        len(path_filter.allowed),
        len(path_filter.excluded),
    )
    return path_filter


def must_compile(
    allowed: Iterable[str] | None = None,
    excluded: Iterable[str] | None = None,
) -> PatternFilter:
    """Like ``compile`` but aborts the process on invalid patterns.

    Only for pattern literals fixed at build time, such as module-level
    filters. Never pass user input.

    Raises:
        SystemExit: If a pattern is malformed.
    """
    try:
        return compile(allowed, excluded)
    except InvalidPatternError as exc:
        logger.critical("Cannot compile static filter: %s", exc)
        raise SystemExit(f"filter: compile(): {exc}") from exc
