"""Sunrise and sunset times from the 1990 Almanac for Computers.

The algorithm is a first-order approximation published by the Nautical
Almanac Office. For mid-latitude sites it agrees with the US Naval
Observatory tables to within about one minute.
"""

from __future__ import annotations

import logging
from math import acos, asin, atan, copysign, cos, floor, inf, isfinite, isnan, sin, tan

from sunrise_almanac.astro.angles import (
    degrees_to_radians,
    normalize_to_24,
    normalize_to_360,
    radians_to_degrees,
)
from sunrise_almanac.contracts import Circumpolar, SolarEvent, SolarEventTime, SunLocation

logger = logging.getLogger(__name__)

# Half a minute in hours, added before truncating to whole minutes.
_ROUNDING_BIAS_HOURS = 0.00833333


def _hour_angle_cosine(sin_dec: float, cos_dec: float, location: SunLocation) -> float:
    """Return cos(H) for the configured zenith, mapping x/0 to +-inf."""
    lat_rad = degrees_to_radians(location.latitude)
    numerator = cos(degrees_to_radians(location.zenith)) - sin_dec * sin(lat_rad)
    denominator = cos_dec * cos(lat_rad)
    if denominator == 0.0:
        if numerator == 0.0:
            return float("nan")
        return copysign(inf, numerator) * copysign(1.0, denominator)
    return numerator / denominator


def solar_event_time(
    ordinal_day: int,
    event: SolarEvent,
    utc_offset_hours: float,
    location: SunLocation,
) -> SolarEventTime:
    """Compute the local clock time of sunrise or sunset.

    Args:
        ordinal_day: Day of year, 1-366.
        event: Sunrise or sunset.
        utc_offset_hours: Local clock offset from UTC in fractional hours.
        location: Latitude, longitude and zenith of the observer.

    Returns:
        The event time truncated to the minute. When the sun does not cross
        the zenith that day the result is ``(0, 0)`` with ``circumpolar`` set.
        Non-finite coordinates or zenith give the bare ``(0, 0)`` default.
    """
    if not all(isfinite(v) for v in (location.latitude, location.longitude, location.zenith)):
        return SolarEventTime()

    sunset = event is SolarEvent.SUNSET

    lon_hour = location.longitude / 15.0
    if sunset:
        t = ordinal_day + ((18.0 - lon_hour) / 24.0)
    else:
        t = ordinal_day + ((6.0 - lon_hour) / 24.0)

    mean_anomaly = (0.9856 * t) - 3.289

    m_rad = degrees_to_radians(mean_anomaly)
    true_longitude = normalize_to_360(
        mean_anomaly + (1.916 * sin(m_rad)) + (0.02 * sin(2.0 * m_rad)) + 282.634
    )

    right_ascension = normalize_to_360(
        radians_to_degrees(atan(0.91764 * tan(degrees_to_radians(true_longitude))))
    )
    # Same quadrant as the true longitude.
    l_quadrant = floor(true_longitude / 90.0) * 90.0
    ra_quadrant = floor(right_ascension / 90.0) * 90.0
    right_ascension = (right_ascension + (l_quadrant - ra_quadrant)) / 15.0

    sin_dec = 0.39782 * sin(degrees_to_radians(true_longitude))
    cos_dec = cos(asin(sin_dec))

    cos_h = _hour_angle_cosine(sin_dec, cos_dec, location)
    if cos_h > 1.0:
        logger.debug(f"sun never rises on day {ordinal_day} at lat {location.latitude}")
        return SolarEventTime(circumpolar=Circumpolar.NEVER_RISES)
    if cos_h < -1.0:
        logger.debug(f"sun never sets on day {ordinal_day} at lat {location.latitude}")
        return SolarEventTime(circumpolar=Circumpolar.NEVER_SETS)
    if isnan(cos_h):
        return SolarEventTime()

    if sunset:
        hour_angle = radians_to_degrees(acos(cos_h))
    else:
        hour_angle = 360.0 - radians_to_degrees(acos(cos_h))
    hour_angle /= 15.0

    local_mean_time = hour_angle + right_ascension - (0.06571 * t) - 6.622

    ut = normalize_to_24(local_mean_time - lon_hour)
    ut = normalize_to_24(ut + utc_offset_hours) + _ROUNDING_BIAS_HOURS
    if not isfinite(ut):
        return SolarEventTime()

    hour = floor(ut)
    minute = floor(60.0 * (ut - hour))
    return SolarEventTime(hour=hour, minute=minute)
