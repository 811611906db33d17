"""Leap year and day-of-year helpers."""

from __future__ import annotations

from math import floor

from sunrise_almanac.time.interfaces import CalendarFields


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def ordinal_date(year: int, month: int, day: int) -> int:
    """Return the day of year (1-366) without a days-per-month table."""
    if month == 1:
        return day
    if month == 2:
        return day + 31
    n = floor(30.6 * (month + 1)) + day - 122
    return n + (60 if is_leap_year(year) else 59)


def ordinal_date_for(fields: CalendarFields) -> int:
    """Return the day of year for decomposed calendar fields."""
    return ordinal_date(fields.year, fields.month, fields.day)
