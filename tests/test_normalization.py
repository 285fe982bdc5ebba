from __future__ import annotations

from datetime import date, time

import pytest

from pytrackview.config import TrackerConfig
from pytrackview.exceptions import TrackViewConfigError
from pytrackview.formatting import format_date
from pytrackview.ingestion.normalize import dig, parse_dmy_date, parse_time_of_day, safe_float
from pytrackview.state.policy import resolve_selection, revalidate


def test_parse_dmy_date_field_order() -> None:
    assert parse_dmy_date("05-12-2025") == date(2025, 12, 5)
    assert parse_dmy_date(" 31-07-2025 ") == date(2025, 7, 31)


@pytest.mark.parametrize("value", [None, "", "2025-12-05", "12-2025", "aa-bb-cccc", "30-02-2025", 5122025])
def test_parse_dmy_date_rejects_other_shapes(value: object) -> None:
    assert parse_dmy_date(value) is None


def test_parse_time_of_day() -> None:
    assert parse_time_of_day("07:30") == time(7, 30)
    assert parse_time_of_day("07:30:15") == time(7, 30, 15)
    assert parse_time_of_day("late") is None
    assert parse_time_of_day(None) is None


def test_safe_float() -> None:
    assert safe_float("4.5") == 4.5
    assert safe_float(3) == 3.0
    assert safe_float("nan") is None
    assert safe_float(True) is None
    assert safe_float("") is None


def test_dig_stops_at_non_mappings() -> None:
    payload = {"datetime": {"user": {"date": "01-08-2025"}}}

    assert dig(payload, "datetime", "user", "date") == "01-08-2025"
    assert dig(payload, "datetime", "server", "date") is None
    assert dig({"datetime": "01-08-2025"}, "datetime", "user") is None


def test_selection_policy() -> None:
    assert resolve_selection(0, 1) == 0
    assert resolve_selection(1, 1) is None
    assert resolve_selection(-1, 3) is None
    assert resolve_selection(0, 0) is None
    assert revalidate(None, 10) is None
    assert revalidate(2, 3) == 2
    assert revalidate(3, 3) is None


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("08-08-2025", "Aug 08, 2025"),
        ("05-12-2025", "Dec 05, 2025"),
        ("", ""),
        (None, ""),
        ("08-2025", "08-2025"),
        ("31-02-2025", "31-02-2025"),
    ],
)
def test_format_date(value: str | None, expected: str) -> None:
    assert format_date(value) == expected


def test_config_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRACKVIEW_VEHICLE_ID", "BIKE-9")
    monkeypatch.setenv("TRACKVIEW_SESSION_COOKIE", "laravel_session=xyz")
    monkeypatch.setenv("TRACKVIEW_CUTOFF_DATE", "2025-09-01")
    monkeypatch.setenv("TRACKVIEW_REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("TRACKVIEW_API_TRACE_ENABLED", "yes")

    config = TrackerConfig.from_env()

    assert config.vehicle_id == "BIKE-9"
    assert config.session_cookie == "laravel_session=xyz"
    assert config.cutoff_date == date(2025, 9, 1)
    assert config.request_timeout == 5.0
    assert config.api_trace_enabled is True
    assert config.coords_endpoint == "/findmybike/coords/BIKE-9"


def test_config_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRACKVIEW_VEHICLE_ID", "BIKE-9")
    monkeypatch.setenv("TRACKVIEW_CUTOFF_DATE", "2025-09-01")

    config = TrackerConfig.from_env(vehicle_id="BIKE-1", cutoff_date=date(2024, 1, 1))

    assert config.vehicle_id == "BIKE-1"
    assert config.cutoff_date == date(2024, 1, 1)


def test_config_defaults_cutoff() -> None:
    assert TrackerConfig(vehicle_id="BIKE-1").cutoff_date == date(2025, 8, 1)


def test_config_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TRACKVIEW_VEHICLE_ID", raising=False)
    with pytest.raises(TrackViewConfigError):
        TrackerConfig.from_env()

    monkeypatch.setenv("TRACKVIEW_VEHICLE_ID", "BIKE-9")
    monkeypatch.setenv("TRACKVIEW_CUTOFF_DATE", "01-09-2025")
    with pytest.raises(TrackViewConfigError):
        TrackerConfig.from_env()

    with pytest.raises(TrackViewConfigError):
        TrackerConfig(vehicle_id="  ")
