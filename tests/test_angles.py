"""Tests for angle conversion and single-step normalization."""

from __future__ import annotations

import pytest

from sunrise_almanac.astro.angles import (
    PI,
    degrees_to_radians,
    normalize_to_24,
    normalize_to_360,
    radians_to_degrees,
)


def test_conversions_use_truncated_pi() -> None:
    """Conversions should use 3.141593 rather than math.pi."""
    assert PI == 3.141593
    assert degrees_to_radians(180.0) == pytest.approx(3.141593, abs=1e-12)
    assert radians_to_degrees(PI) == pytest.approx(180.0, abs=1e-12)


def test_normalize_to_360_single_step() -> None:
    """One period is added or removed at most."""
    assert normalize_to_360(370.0) == 10.0
    assert normalize_to_360(-10.0) == 350.0
    assert normalize_to_360(123.5) == 123.5
    assert normalize_to_360(800.0) == 440.0
    assert normalize_to_360(-400.0) == -40.0


def test_normalize_boundaries_are_left_alone() -> None:
    """Exact period boundaries are not wrapped."""
    assert normalize_to_360(360.0) == 360.0
    assert normalize_to_360(0.0) == 0.0
    assert normalize_to_24(24.0) == 24.0


def test_normalize_to_24_single_step() -> None:
    """Hours wrap by a single day."""
    assert normalize_to_24(25.0) == 1.0
    assert normalize_to_24(-1.0) == 23.0
    assert normalize_to_24(50.0) == 26.0
