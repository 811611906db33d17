"""Angle conversion and wraparound helpers used by the almanac algorithm."""

from __future__ import annotations

# Truncated value used by the reference tables; keep it instead of math.pi.
PI = 3.141593


def degrees_to_radians(degrees: float) -> float:
    """Convert degrees to radians using the almanac's truncated pi."""
    return degrees * PI / 180.0


def radians_to_degrees(radians: float) -> float:
    """Convert radians to degrees using the almanac's truncated pi."""
    return radians / (PI / 180.0)


def normalize_to_360(angle_deg: float) -> float:
    """Move an angle toward [0, 360) with a single correction step.

    Values more than one period out of range stay out of range,
    e.g. ``normalize_to_360(800.0) == 440.0``.
    """
    if angle_deg > 360.0:
        return angle_deg - 360.0
    if angle_deg < 0.0:
        return angle_deg + 360.0
    return angle_deg


def normalize_to_24(hours: float) -> float:
    """Move an hour value toward [0, 24) with a single correction step."""
    if hours > 24.0:
        return hours - 24.0
    if hours < 0.0:
        return hours + 24.0
    return hours
