"""Presentation helpers for solar event times."""

from __future__ import annotations

from sunrise_almanac.contracts import SolarEventTime
from sunrise_almanac.time.interfaces import CalendarFields, CalendarUtility, Timestamp


def to_hhmm(event_time: SolarEventTime) -> int:
    """Encode an event time as ``hour * 100 + minute``."""
    return 100 * event_time.hour + event_time.minute


def from_hhmm(code: int) -> tuple[int, int]:
    """Decode an ``hhmm`` integer into ``(hour, minute)``."""
    return divmod(code, 100)


def to_timestamp(
    fields: CalendarFields,
    event_time: SolarEventTime,
    calendar: CalendarUtility,
) -> Timestamp:
    """Place an event time on the decomposed date, seconds zeroed."""
    return calendar.compose(fields.with_clock(event_time.hour, event_time.minute, 0))
