"""Named pattern groups expanded during filter compilation."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

IMAGE_EXTENSIONS: Final[str] = "_IMAGE_EXTENSIONS_"

PATTERN_GROUPS: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        IMAGE_EXTENSIONS: (
            "*.jpg",
            "*.jpeg",
            "*.png",
            "*.gif",
            "*.bmp",
            "*.webp",
            "*.tiff",
            "*.tif",
        ),
    }
)

# substituted when a filter is compiled with no allowed patterns
DEFAULT_ALLOWED_GROUP: Final[str] = IMAGE_EXTENSIONS


def is_group_token(name: str) -> bool:
    return name in PATTERN_GROUPS


def get_group_patterns(name: str) -> tuple[str, ...]:
    """Return the patterns a named group expands to.

    Args:
        name: Group token, e.g. ``_IMAGE_EXTENSIONS_``.

    Returns:
        tuple[str, ...]: Patterns in expansion order.

    Raises:
        ValueError: If ``name`` is not a known group.
    """
    if name not in PATTERN_GROUPS:
        known = ", ".join(sorted(PATTERN_GROUPS))
        raise ValueError(f"Unknown pattern group '{name}'. Known groups: {known}")
    return PATTERN_GROUPS[name]
