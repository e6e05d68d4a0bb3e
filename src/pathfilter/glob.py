"""Glob pattern engine built on pathspec's regex pattern type.

Grammar::

    *       any run of non-separator characters
    ?       exactly one non-separator character
    [...]   one character from the class; ``a-z`` ranges, leading ``^``
            or ``!`` negates
    \\x      literal ``x``

A pattern containing ``/`` is matched against the whole path. A pattern
without ``/`` is matched against the last path segment only.
"""

from __future__ import annotations

import re

from pathspec.pattern import RegexMatchResult, RegexPattern

SEPARATOR = "/"

_NEGATE_CHARS = "^!"


class GlobSyntaxError(ValueError):
    """Raised when a glob pattern is malformed.

    Attributes:
        pattern: The malformed pattern.
        reason: Short description of the problem.
    """

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"{reason}: {pattern!r}")
        self.pattern = pattern
        self.reason = reason


class GlobPattern(RegexPattern):
    """Compiled glob pattern.

    Raises ``GlobSyntaxError`` on construction when the pattern is malformed,
    so an instance always holds a valid matcher.
    """

    __slots__ = ("anchored",)

    def __init__(self, pattern: str) -> None:
        super().__init__(pattern)
        self.anchored = SEPARATOR in pattern

    @classmethod
    def pattern_to_regex(cls, pattern: str) -> tuple[str, bool]:
        """Translate *pattern* into a regular expression.

        Args:
            pattern: Glob pattern text.

        Returns:
            tuple[str, bool]: Regex source and the include flag (always
            ``True``).

        Raises:
            GlobSyntaxError: If the pattern is malformed.
        """
        return "(?s:" + _translate(pattern) + r")\Z", True

    def match_file(self, file: str) -> RegexMatchResult | None:
        if not self.anchored:
            file = base_name(file)
        return super().match_file(file)

    def matches(self, path: str) -> bool:
        return self.match_file(path) is not None


def compile_glob(pattern: str) -> GlobPattern:
    """Compile *pattern*, raising ``GlobSyntaxError`` if it is malformed."""
    return GlobPattern(pattern)


def base_name(path: str) -> str:
    """Return the last segment of *path*, ignoring one trailing separator."""
    if path.endswith(SEPARATOR):
        path = path[:-1]
    return path.rsplit(SEPARATOR, 1)[-1]


def _translate(pattern: str) -> str:
    parts: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        char = pattern[i]
        i += 1
        if char == "*":
            # collapse runs of stars
            while i < n and pattern[i] == "*":
                i += 1
            parts.append(f"[^{SEPARATOR}]*")
        elif char == "?":
            parts.append(f"[^{SEPARATOR}]")
        elif char == "[":
            char_class, i = _translate_class(pattern, i)
            parts.append(char_class)
        elif char == "\\":
            if i >= n:
                raise GlobSyntaxError(pattern, "trailing backslash")
            parts.append(re.escape(pattern[i]))
            i += 1
        else:
            parts.append(re.escape(char))
    return "".join(parts)


def _translate_class(pattern: str, i: int) -> tuple[str, int]:
    """Translate a character class whose ``[`` ends just before index *i*.

    Returns:
        tuple[str, int]: Regex class source and the index after ``]``.
    """
    n = len(pattern)
    negate = i < n and pattern[i] in _NEGATE_CHARS
    if negate:
        i += 1

    items: list[str] = []
    while True:
        if i >= n:
            raise GlobSyntaxError(pattern, "missing closing ']'")
        if pattern[i] == "]" and items:
            i += 1
            break
        low, i = _class_char(pattern, i)
        if i < n and pattern[i] == "-":
            high, i = _class_char(pattern, i + 1)
            if high < low:
                raise GlobSyntaxError(pattern, f"reversed range {low}-{high}")
            items.append(f"{re.escape(low)}-{re.escape(high)}")
        else:
            items.append(re.escape(low))

    prefix = f"^{re.escape(SEPARATOR)}" if negate else ""
    return "[" + prefix + "".join(items) + "]", i


def _class_char(pattern: str, i: int) -> tuple[str, int]:
    n = len(pattern)
    if i >= n:
        raise GlobSyntaxError(pattern, "missing closing ']'")
    char = pattern[i]
    if char in "-]":
        raise GlobSyntaxError(pattern, "bad character range")
    i += 1
    if char == "\\":
        if i >= n:
            raise GlobSyntaxError(pattern, "missing closing ']'")
        char = pattern[i]
        i += 1
    return char, i
