"""Daily sunrise/sunset schedules and day/night decisions for controllers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any

import numpy as np

from sunrise_almanac.calculator import SunriseCalculator
from sunrise_almanac.contracts import Circumpolar, SolarEventTime
from sunrise_almanac.format.outputs import to_hhmm
from sunrise_almanac.time.interfaces import Timestamp

logger = logging.getLogger(__name__)

_MINUTES_PER_DAY = 24 * 60


def _has_reason(reason: Circumpolar, *events: SolarEventTime) -> bool:
    return any(event.circumpolar is reason for event in events)


@dataclass(frozen=True)
class DaySchedule:
    """Sunrise and sunset for one calendar date."""

    day: date
    sunrise: SolarEventTime
    sunset: SolarEventTime

    @property
    def sunrise_hhmm(self) -> int:
        return to_hhmm(self.sunrise)

    @property
    def sunset_hhmm(self) -> int:
        return to_hhmm(self.sunset)

    @property
    def daylight_minutes(self) -> int:
        """Minutes between sunrise and sunset; 1440 for polar day, 0 for polar night."""
        if _has_reason(Circumpolar.NEVER_SETS, self.sunrise, self.sunset):
            return _MINUTES_PER_DAY
        if _has_reason(Circumpolar.NEVER_RISES, self.sunrise, self.sunset):
            return 0
        return (self.sunset.minute_of_day - self.sunrise.minute_of_day) % _MINUTES_PER_DAY

    def to_dict(self) -> dict[str, Any]:
        """Serialize the row to a JSON-compatible dictionary."""
        return {
            "day": self.day.isoformat(),
            "sunrise_hhmm": self.sunrise_hhmm,
            "sunset_hhmm": self.sunset_hhmm,
            "sunrise_circumpolar": self.sunrise.circumpolar,
            "sunset_circumpolar": self.sunset.circumpolar,
            "daylight_minutes": self.daylight_minutes,
        }


def build_year_schedule(
    calculator: SunriseCalculator,
    year: int,
    utc_offset_minutes: int = 0,
) -> list[DaySchedule]:
    """Compute sunrise and sunset for every date of a year."""
    if year < 1 or year > 9999:
        raise ValueError("year must be within 1..9999")

    rows: list[DaySchedule] = []
    current = date(year, 1, 1)
    while current.year == year:
        sunrise, sunset = calculator.events(datetime.combine(current, time()), utc_offset_minutes)
        rows.append(DaySchedule(day=current, sunrise=sunrise, sunset=sunset))
        current += timedelta(days=1)

    logger.debug(f"built {len(rows)} schedule rows for {year} at {calculator.location}")
    return rows


def summarize_daylight(schedule: list[DaySchedule]) -> dict[str, Any]:
    """Return daylight statistics for a schedule."""
    if not schedule:
        raise ValueError("schedule must not be empty")

    minutes = np.asarray([row.daylight_minutes for row in schedule], dtype=np.int64)
    shortest = int(np.argmin(minutes))
    longest = int(np.argmax(minutes))
    return {
        "days": int(minutes.size),
        "min_daylight_minutes": int(minutes[shortest]),
        "max_daylight_minutes": int(minutes[longest]),
        "mean_daylight_minutes": float(np.mean(minutes)),
        "shortest_day": schedule[shortest].day.isoformat(),
        "longest_day": schedule[longest].day.isoformat(),
        "polar_day_count": int(np.count_nonzero(minutes == _MINUTES_PER_DAY)),
        "polar_night_count": int(np.count_nonzero(minutes == 0)),
    }


def is_dark(calculator: SunriseCalculator, ts: Timestamp, utc_offset_minutes: int) -> bool:
    """Return True when ``ts`` falls outside the sunrise-to-sunset window.

    ``ts`` is read as local clock time matching ``utc_offset_minutes``.
    """
    sunrise, sunset = calculator.events(ts, utc_offset_minutes)
    if _has_reason(Circumpolar.NEVER_SETS, sunrise, sunset):
        return False
    if _has_reason(Circumpolar.NEVER_RISES, sunrise, sunset):
        return True

    fields = calculator.calendar_for(ts).decompose(ts)
    now = fields.hour * 60 + fields.minute
    rise = sunrise.minute_of_day
    set_ = sunset.minute_of_day
    if rise <= set_:
        return not (rise <= now < set_)
    return set_ <= now < rise
