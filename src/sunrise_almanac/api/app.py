"""FastAPI app exposing sunrise/sunset and yearly schedule endpoints."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Literal

from fastapi import FastAPI
from pydantic import BaseModel, Field

from sunrise_almanac.calculator import SunriseCalculator
from sunrise_almanac.config import resolve_zenith
from sunrise_almanac.contracts import Circumpolar, SolarEventTime
from sunrise_almanac.orchestrate.schedule import build_year_schedule, summarize_daylight

logger = logging.getLogger(__name__)

ZenithName = Literal["official", "civil", "nautical", "astronomical"]


class SiteRequest(BaseModel):
    """Observer location, zenith and fixed clock offset."""

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    zenith: ZenithName | float = "official"
    utc_offset_minutes: int = Field(default=0, ge=-24 * 60, le=24 * 60)

    def to_calculator(self) -> SunriseCalculator:
        """Build a calculator for this site."""
        return SunriseCalculator(self.lat, self.lon, resolve_zenith(self.zenith))


class SunTimesRequest(SiteRequest):
    """Request schema for one date."""

    day: date


class SunTimesResponse(BaseModel):
    """Sunrise/sunset for one date in both output encodings."""

    sunrise_hhmm: int
    sunset_hhmm: int
    sunrise: datetime | None
    sunset: datetime | None
    sunrise_circumpolar: Circumpolar | None
    sunset_circumpolar: Circumpolar | None


class ScheduleRequest(SiteRequest):
    """Request schema for a full-year schedule."""

    year: int = Field(ge=1, le=9999)


class ScheduleRow(BaseModel):
    """One schedule day."""

    day: date
    sunrise_hhmm: int
    sunset_hhmm: int
    sunrise_circumpolar: Circumpolar | None
    sunset_circumpolar: Circumpolar | None
    daylight_minutes: int


class DaylightSummary(BaseModel):
    """Aggregate daylight statistics for a schedule."""

    days: int
    min_daylight_minutes: int
    max_daylight_minutes: int
    mean_daylight_minutes: float
    shortest_day: date
    longest_day: date
    polar_day_count: int
    polar_night_count: int


class ScheduleResponse(BaseModel):
    """Yearly schedule payload."""

    rows: list[ScheduleRow]
    summary: DaylightSummary


def _occurring(event: SolarEventTime, ts: datetime) -> datetime | None:
    """Return the timestamp only when the event actually happens."""
    return ts if event.occurs else None


def create_app() -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Sunrise Almanac API", version="0.1.0")

    @app.post("/sun-times", response_model=SunTimesResponse)
    def post_sun_times(payload: SunTimesRequest) -> SunTimesResponse:
        """Compute sunrise and sunset for one date and site."""
        calculator = payload.to_calculator()
        ts = datetime.combine(payload.day, time())
        sunrise, sunset = calculator.events(ts, payload.utc_offset_minutes)
        sunrise_code, sunset_code = calculator.calculate(ts, payload.utc_offset_minutes)
        sunrise_ts, sunset_ts = calculator.calculate_times(ts, payload.utc_offset_minutes)
        return SunTimesResponse(
            sunrise_hhmm=sunrise_code,
            sunset_hhmm=sunset_code,
            sunrise=_occurring(sunrise, sunrise_ts),
            sunset=_occurring(sunset, sunset_ts),
            sunrise_circumpolar=sunrise.circumpolar,
            sunset_circumpolar=sunset.circumpolar,
        )

    @app.post("/schedule", response_model=ScheduleResponse)
    def post_schedule(payload: ScheduleRequest) -> ScheduleResponse:
        """Compute a full-year sunrise/sunset schedule for one site."""
        calculator = payload.to_calculator()
        rows = build_year_schedule(calculator, payload.year, payload.utc_offset_minutes)
        logger.info(f"schedule built year={payload.year} rows={len(rows)}")
        return ScheduleResponse(
            rows=[ScheduleRow(**row.to_dict()) for row in rows],
            summary=DaylightSummary(**summarize_daylight(rows)),
        )

    return app


app = create_app()
