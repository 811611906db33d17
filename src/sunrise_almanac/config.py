"""
Site configuration for sunrise/sunset calculations.

Values come from explicit arguments or from environment variables:

Required:
  - SUNRISE_LATITUDE
  - SUNRISE_LONGITUDE

Optional:
  - SUNRISE_ZENITH (official, civil, nautical, astronomical or degrees; default official)
  - SUNRISE_UTC_OFFSET_MINUTES (default 0)
"""
from __future__ import annotations

from dataclasses import dataclass
import os
from collections.abc import Mapping

from sunrise_almanac.contracts import OFFICIAL_ZENITH, ZENITHS


class SiteConfigError(ValueError):
    pass


@dataclass(frozen=True)
class SiteConfig:
    """Location, zenith and fixed clock offset for one site."""
    latitude: float
    longitude: float
    zenith: float = OFFICIAL_ZENITH
    utc_offset_minutes: int = 0


def resolve_zenith(value: str | float) -> float:
    """Resolve a zenith given by standard name or in degrees."""
    if isinstance(value, (int, float)):
        return float(value)
    key = value.strip().lower()
    if key in ZENITHS:
        return ZENITHS[key]
    try:
        return float(key)
    except ValueError as exc:
        names = ", ".join(ZENITHS)
        raise SiteConfigError(f"zenith must be one of: {names}, or degrees; got {value!r}") from exc


def _require_float(env: Mapping[str, str], name: str) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        raise SiteConfigError(f"Missing env {name}")
    try:
        return float(raw)
    except ValueError as exc:
        raise SiteConfigError(f"{name} must be a number; got {raw!r}") from exc


def config_from_env(env: Mapping[str, str] | None = None) -> SiteConfig:
    """Build SiteConfig from environment variables."""
    source = os.environ if env is None else env

    raw_offset = source.get("SUNRISE_UTC_OFFSET_MINUTES", "0")
    try:
        utc_offset_minutes = int(raw_offset)
    except ValueError as exc:
        raise SiteConfigError(
            f"SUNRISE_UTC_OFFSET_MINUTES must be an integer; got {raw_offset!r}"
        ) from exc

    return SiteConfig(
        latitude=_require_float(source, "SUNRISE_LATITUDE"),
        longitude=_require_float(source, "SUNRISE_LONGITUDE"),
        zenith=resolve_zenith(source.get("SUNRISE_ZENITH", "official")),
        utc_offset_minutes=utc_offset_minutes,
    )
