"""Shared fixtures for pathfilter tests."""

from __future__ import annotations

import pytest

from pathfilter.filter import PatternFilter, compile


@pytest.fixture
def image_filter() -> PatternFilter:
    """Filter built with no patterns at all, i.e. the default image group."""
    return compile([], [])


@pytest.fixture
def photo_filter() -> PatternFilter:
    """Filter used by the end-to-end examples.

    Allows ``*.png`` and ``*.jpg`` anywhere, excludes direct children of
    ``tmp/``.
    """
    return compile(["*.png", "*.jpg"], ["tmp/*"])
