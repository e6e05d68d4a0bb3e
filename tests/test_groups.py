"""Tests for pathfilter.groups."""

import pytest

from pathfilter.groups import (
    DEFAULT_ALLOWED_GROUP,
    IMAGE_EXTENSIONS,
    PATTERN_GROUPS,
    get_group_patterns,
    is_group_token,
)


class TestPatternGroups:
    @pytest.mark.parametrize(
        "pattern",
        ["*.jpg", "*.jpeg", "*.png", "*.gif", "*.bmp", "*.webp", "*.tiff", "*.tif"],
    )
    def test_image_group_members(self, pattern: str) -> None:
        assert pattern in get_group_patterns(IMAGE_EXTENSIONS)

    def test_image_group_order_is_stable(self) -> None:
        patterns = get_group_patterns(IMAGE_EXTENSIONS)
        assert patterns[:3] == ("*.jpg", "*.jpeg", "*.png")

    def test_default_group_is_images(self) -> None:
        assert DEFAULT_ALLOWED_GROUP == "_IMAGE_EXTENSIONS_"

    def test_unknown_group_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown pattern group"):
            get_group_patterns("_VIDEO_EXTENSIONS_")

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("_IMAGE_EXTENSIONS_", True),
            ("*.png", False),
            ("_image_extensions_", False),
            ("", False),
        ],
    )
    def test_is_group_token(self, name: str, expected: bool) -> None:
        assert is_group_token(name) is expected

    def test_groups_are_read_only(self) -> None:
        with pytest.raises(TypeError):
            PATTERN_GROUPS["_NEW_"] = ("*.x",)  # type: ignore[index]

    def test_all_groups_are_tuples(self) -> None:
        for name, patterns in PATTERN_GROUPS.items():
            assert isinstance(patterns, tuple), f"Group '{name}' should be a tuple"
            assert all(isinstance(p, str) for p in patterns)
