"""Core data contracts for sunrise/sunset calculations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

OFFICIAL_ZENITH = 90.83333
CIVIL_ZENITH = 96.0
NAUTICAL_ZENITH = 102.0
ASTRONOMICAL_ZENITH = 108.0

ZENITHS: dict[str, float] = {
    "official": OFFICIAL_ZENITH,
    "civil": CIVIL_ZENITH,
    "nautical": NAUTICAL_ZENITH,
    "astronomical": ASTRONOMICAL_ZENITH,
}


@dataclass(frozen=True, slots=True)
class SunLocation:
    """Observer location and the zenith that defines the rise/set event.

    Latitude is north positive and longitude east positive, both in degrees.
    No range validation is applied; out-of-range values give degenerate
    but finite results.
    """

    latitude: float
    longitude: float
    zenith: float = OFFICIAL_ZENITH


class SolarEvent(StrEnum):
    """Which horizon crossing to compute."""

    SUNRISE = "sunrise"
    SUNSET = "sunset"


class Circumpolar(StrEnum):
    """Reason a solar event does not happen on a given day."""

    NEVER_RISES = "never_rises"
    NEVER_SETS = "never_sets"


@dataclass(frozen=True, slots=True)
class SolarEventTime:
    """Local clock time of one solar event.

    When the event does not occur, ``hour`` and ``minute`` keep the legacy
    ``(0, 0)`` sentinel and ``circumpolar`` carries the reason.

    ``hour`` can be 24 (with ``minute`` 0) when the half-minute rounding
    pushes a time just before midnight past it; recomposed timestamps then
    fall on 00:00 of the next day.
    """

    hour: int = 0
    minute: int = 0
    circumpolar: Circumpolar | None = None

    @property
    def occurs(self) -> bool:
        """Return True when the sun actually crosses the zenith that day."""
        return self.circumpolar is None

    @property
    def minute_of_day(self) -> int:
        return self.hour * 60 + self.minute
