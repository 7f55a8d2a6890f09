"""Pytest configuration for kernel tests.

Provides shared geometry used across the test modules.
"""

import pytest

from core.bbox import BBox
from core.point import Point


@pytest.fixture
def unit_box():
    """Axis-aligned box spanning [-1, 1] on every axis."""
    return BBox(Point(-1.0, -1.0, -1.0), Point(1.0, 1.0, 1.0))


@pytest.fixture
def origin():
    return Point(0.0, 0.0, 0.0)
