"""Calendar utilities for ``datetime`` and epoch-second timestamps."""

from __future__ import annotations

import calendar as _stdlib_calendar
from datetime import UTC, datetime, timedelta

from sunrise_almanac.time.interfaces import CalendarFields, CalendarUtility, Timestamp


def _clock_offset(fields: CalendarFields) -> timedelta:
    # Linear so that hour=24 rolls into the next day instead of failing.
    return timedelta(hours=fields.hour, minutes=fields.minute, seconds=fields.second)


class DatetimeCalendar:
    """Calendar utility for ``datetime`` values, naive or timezone-aware.

    Fields are read in the datetime's own wall clock and ``tzinfo`` is carried
    through to the recomposed value. Microseconds are dropped.
    """

    def decompose(self, ts: Timestamp) -> CalendarFields:
        """Split a datetime into calendar fields."""
        if not isinstance(ts, datetime):
            raise TypeError("DatetimeCalendar expects a datetime timestamp.")
        return CalendarFields(
            year=ts.year,
            month=ts.month,
            day=ts.day,
            hour=ts.hour,
            minute=ts.minute,
            second=ts.second,
            tzinfo=ts.tzinfo,
        )

    def compose(self, fields: CalendarFields) -> datetime:
        """Rebuild a datetime from calendar fields."""
        midnight = datetime(fields.year, fields.month, fields.day, tzinfo=fields.tzinfo)
        return midnight + _clock_offset(fields)


class EpochCalendar:
    """Calendar utility for integer epoch seconds with fields read in UTC.

    This matches ``time_t`` handling on devices that keep local time in the
    epoch counter and never apply a zone themselves.
    """

    def decompose(self, ts: Timestamp) -> CalendarFields:
        """Split epoch seconds into UTC calendar fields."""
        if isinstance(ts, datetime):
            raise TypeError("EpochCalendar expects integer epoch seconds.")
        dt = datetime.fromtimestamp(int(ts), UTC)
        return CalendarFields(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    def compose(self, fields: CalendarFields) -> int:
        """Rebuild epoch seconds from UTC calendar fields."""
        midnight = _stdlib_calendar.timegm((fields.year, fields.month, fields.day, 0, 0, 0))
        return midnight + int(_clock_offset(fields).total_seconds())


def calendar_for(ts: Timestamp) -> CalendarUtility:
    """Select the calendar utility matching the timestamp type."""
    if isinstance(ts, datetime):
        return DatetimeCalendar()
    if isinstance(ts, int) and not isinstance(ts, bool):
        return EpochCalendar()
    raise TypeError("timestamp must be a datetime or integer epoch seconds.")
