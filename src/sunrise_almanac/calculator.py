"""Sunrise/sunset calculator bound to one observer location."""

from __future__ import annotations

from sunrise_almanac.astro.sunrise import solar_event_time
from sunrise_almanac.config import SiteConfig
from sunrise_almanac.contracts import OFFICIAL_ZENITH, SolarEvent, SolarEventTime, SunLocation
from sunrise_almanac.format.outputs import to_hhmm, to_timestamp
from sunrise_almanac.time.calendar import calendar_for
from sunrise_almanac.time.interfaces import CalendarFields, CalendarUtility, Timestamp
from sunrise_almanac.time.ordinal import ordinal_date_for


class SunriseCalculator:
    """Compute daily sunrise and sunset for a fixed location and zenith.

    Instances hold no mutable state and may be shared across threads.
    """

    def __init__(
        self,
        latitude: float,
        longitude: float,
        zenith: float = OFFICIAL_ZENITH,
        calendar: CalendarUtility | None = None,
    ) -> None:
        """Bind the calculator to a location and an optional calendar utility."""
        self._location = SunLocation(latitude=latitude, longitude=longitude, zenith=zenith)
        self._calendar = calendar

    @classmethod
    def from_config(cls, config: SiteConfig) -> "SunriseCalculator":
        """Build a calculator from a site configuration."""
        return cls(config.latitude, config.longitude, config.zenith)

    @property
    def location(self) -> SunLocation:
        return self._location

    def calendar_for(self, ts: Timestamp) -> CalendarUtility:
        """Return the injected calendar utility, or one matching the timestamp type."""
        return self._calendar if self._calendar is not None else calendar_for(ts)

    def _events_for(
        self, fields: CalendarFields, utc_offset_minutes: int
    ) -> tuple[SolarEventTime, SolarEventTime]:
        ordinal_day = ordinal_date_for(fields)
        offset_hours = utc_offset_minutes / 60.0
        return (
            self.solar_event(ordinal_day, SolarEvent.SUNRISE, offset_hours),
            self.solar_event(ordinal_day, SolarEvent.SUNSET, offset_hours),
        )

    def solar_event(
        self, ordinal_day: int, event: SolarEvent, utc_offset_hours: float
    ) -> SolarEventTime:
        """Compute one event for a day of year."""
        return solar_event_time(ordinal_day, event, utc_offset_hours, self._location)

    def events(
        self, ts: Timestamp, utc_offset_minutes: int
    ) -> tuple[SolarEventTime, SolarEventTime]:
        """Return ``(sunrise, sunset)`` event times for the timestamp's date."""
        fields = self.calendar_for(ts).decompose(ts)
        return self._events_for(fields, utc_offset_minutes)

    def calculate(self, ts: Timestamp, utc_offset_minutes: int) -> tuple[int, int]:
        """Return sunrise and sunset as ``hhmm`` integers.

        A day without sunrise or sunset yields ``0`` for that event.
        """
        sunrise, sunset = self.events(ts, utc_offset_minutes)
        return to_hhmm(sunrise), to_hhmm(sunset)

    def calculate_times(
        self, ts: Timestamp, utc_offset_minutes: int
    ) -> tuple[Timestamp, Timestamp]:
        """Return sunrise and sunset as timestamps on the input date.

        The result has the same type as ``ts``. Seconds are zero for both.
        """
        calendar = self.calendar_for(ts)
        fields = calendar.decompose(ts)
        sunrise, sunset = self._events_for(fields, utc_offset_minutes)
        return (
            to_timestamp(fields, sunrise, calendar),
            to_timestamp(fields, sunset, calendar),
        )
