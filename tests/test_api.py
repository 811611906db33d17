"""API tests for sun-times and schedule endpoints."""

from __future__ import annotations

import pytest


def _client() -> object:
    """Create FastAPI TestClient with optional dependency guards."""
    pytest.importorskip("fastapi")
    testclient_module = pytest.importorskip("fastapi.testclient")
    from sunrise_almanac.api.app import create_app

    return testclient_module.TestClient(create_app())


def test_sun_times_endpoint_returns_both_encodings() -> None:
    """`POST /sun-times` returns matching hhmm codes and timestamps."""
    client = _client()

    response = client.post(
        "/sun-times",
        json={"day": "2021-06-21", "lat": 42.93, "lon": -83.62, "utc_offset_minutes": -240},
    )

    assert response.status_code == 200
    body = response.json()
    assert 550 <= body["sunrise_hhmm"] <= 559
    assert body["sunrise"].startswith("2021-06-21T05:")
    assert body["sunset"].startswith("2021-06-21T21:")
    assert body["sunrise_circumpolar"] is None
    assert body["sunset_circumpolar"] is None


def test_sun_times_endpoint_accepts_named_and_numeric_zenith() -> None:
    """Civil twilight by name matches 96 degrees by number."""
    client = _client()
    base = {"day": "2021-06-21", "lat": 42.93, "lon": -83.62, "utc_offset_minutes": -240}

    named = client.post("/sun-times", json={**base, "zenith": "civil"})
    numeric = client.post("/sun-times", json={**base, "zenith": 96.0})

    assert named.status_code == 200
    assert named.json() == numeric.json()


def test_sun_times_endpoint_reports_midnight_sun() -> None:
    """Circumpolar events have null timestamps and a reason."""
    client = _client()

    response = client.post(
        "/sun-times",
        json={"day": "2021-06-21", "lat": 75.0, "lon": 15.0, "utc_offset_minutes": 60},
    )

    body = response.json()
    assert body["sunset_hhmm"] == 0
    assert body["sunset"] is None
    assert body["sunset_circumpolar"] == "never_sets"


def test_sun_times_endpoint_validates_input() -> None:
    """Out-of-range latitude and unknown zenith names are rejected."""
    client = _client()

    bad_lat = client.post("/sun-times", json={"day": "2021-06-21", "lat": 95.0, "lon": 0.0})
    bad_zenith = client.post(
        "/sun-times", json={"day": "2021-06-21", "lat": 10.0, "lon": 0.0, "zenith": "dusk"}
    )

    assert bad_lat.status_code == 422
    assert bad_zenith.status_code == 422


def test_schedule_endpoint_returns_rows_and_summary() -> None:
    """`POST /schedule` returns one row per day and a summary."""
    client = _client()

    response = client.post(
        "/schedule", json={"year": 2023, "lat": 42.93, "lon": -83.62, "utc_offset_minutes": -300}
    )

    assert response.status_code == 200
    body = response.json()
    assert len(body["rows"]) == 365
    assert body["rows"][0]["day"] == "2023-01-01"
    assert body["summary"]["days"] == 365
    assert body["summary"]["longest_day"].startswith("2023-06")
