"""Tests for site configuration parsing."""

from __future__ import annotations

import pytest

from sunrise_almanac.config import SiteConfig, SiteConfigError, config_from_env, resolve_zenith
from sunrise_almanac.contracts import CIVIL_ZENITH, NAUTICAL_ZENITH, OFFICIAL_ZENITH


def test_config_from_env_defaults() -> None:
    """Zenith defaults to official and offset to zero."""
    cfg = config_from_env({"SUNRISE_LATITUDE": "42.93", "SUNRISE_LONGITUDE": "-83.62"})
    assert cfg == SiteConfig(latitude=42.93, longitude=-83.62, zenith=OFFICIAL_ZENITH, utc_offset_minutes=0)


def test_config_from_env_all_values() -> None:
    """Named zenith and offset are parsed."""
    cfg = config_from_env(
        {
            "SUNRISE_LATITUDE": "-33.87",
            "SUNRISE_LONGITUDE": "151.21",
            "SUNRISE_ZENITH": "civil",
            "SUNRISE_UTC_OFFSET_MINUTES": "600",
        }
    )
    assert cfg.zenith == CIVIL_ZENITH
    assert cfg.utc_offset_minutes == 600


def test_config_from_env_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit mapping os.environ is used."""
    monkeypatch.setenv("SUNRISE_LATITUDE", "10")
    monkeypatch.setenv("SUNRISE_LONGITUDE", "20")
    monkeypatch.delenv("SUNRISE_ZENITH", raising=False)
    monkeypatch.delenv("SUNRISE_UTC_OFFSET_MINUTES", raising=False)
    assert config_from_env() == SiteConfig(latitude=10.0, longitude=20.0)


def test_config_from_env_missing_latitude() -> None:
    """Missing required values raise a config error."""
    with pytest.raises(SiteConfigError, match="SUNRISE_LATITUDE"):
        config_from_env({"SUNRISE_LONGITUDE": "1"})


def test_config_from_env_malformed_values() -> None:
    """Non-numeric values are rejected with the variable name."""
    with pytest.raises(SiteConfigError, match="SUNRISE_LONGITUDE"):
        config_from_env({"SUNRISE_LATITUDE": "1", "SUNRISE_LONGITUDE": "east"})
    with pytest.raises(SiteConfigError, match="SUNRISE_UTC_OFFSET_MINUTES"):
        config_from_env(
            {"SUNRISE_LATITUDE": "1", "SUNRISE_LONGITUDE": "2", "SUNRISE_UTC_OFFSET_MINUTES": "-4h"}
        )


def test_resolve_zenith() -> None:
    """Names are case-insensitive; numbers pass through."""
    assert resolve_zenith(" Nautical ") == NAUTICAL_ZENITH
    assert resolve_zenith("95.5") == 95.5
    assert resolve_zenith(100) == 100.0
    with pytest.raises(SiteConfigError, match="zenith must be one of"):
        resolve_zenith("dusk")
