"""Tests for snapshot model validation."""

from __future__ import annotations

import datetime

import pytest
from pydantic import ValidationError

from weather_panel.weather.models import (
    Condition,
    CurrentConditions,
    ForecastDay,
    WeatherSnapshot,
)


def _current() -> CurrentConditions:
    return CurrentConditions(
        temperature=21,
        condition=Condition.SUNNY,
        humidity=55,
        wind_speed=12,
        feels_like=23,
        uv_index=6,
        sunrise="6:30 AM",
        sunset="8:15 PM",
    )


def _forecast(start: datetime.date, days: int, step: int = 1) -> tuple[ForecastDay, ...]:
    return tuple(
        ForecastDay(
            day=start + datetime.timedelta(days=index * step),
            date="label",
            temperature=18,
            condition=Condition.CLOUDY,
        )
        for index in range(days)
    )


def test_snapshot_accepts_seven_consecutive_days() -> None:
    snapshot = WeatherSnapshot(
        city="Lisbon",
        current=_current(),
        forecast=_forecast(datetime.date(2026, 10, 19), 7),
    )
    assert snapshot.forecast[0].day == datetime.date(2026, 10, 19)


def test_snapshot_rejects_wrong_forecast_length() -> None:
    with pytest.raises(ValidationError):
        WeatherSnapshot(
            city="Lisbon",
            current=_current(),
            forecast=_forecast(datetime.date(2026, 10, 19), 6),
        )


def test_snapshot_rejects_gaps_between_days() -> None:
    with pytest.raises(ValidationError):
        WeatherSnapshot(
            city="Lisbon",
            current=_current(),
            forecast=_forecast(datetime.date(2026, 10, 19), 7, step=2),
        )


def test_snapshot_is_immutable() -> None:
    snapshot = WeatherSnapshot(
        city="Lisbon",
        current=_current(),
        forecast=_forecast(datetime.date(2026, 10, 19), 7),
    )
    with pytest.raises(ValidationError):
        snapshot.city = "Porto"  # type: ignore[misc]


def test_condition_parses_from_display_string() -> None:
    assert CurrentConditions.model_validate(
        {**_current().model_dump(), "condition": "Rainy"}
    ).condition is Condition.RAINY
