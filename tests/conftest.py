"""Shared fixtures for weather panel tests."""

from __future__ import annotations

import asyncio
import datetime
import logging
from collections.abc import Iterator
from typing import Any

import pytest

from weather_panel.exceptions import CityNotFoundError
from weather_panel.weather.base import WeatherSource
from weather_panel.weather.models import (
    Condition,
    CurrentConditions,
    ForecastDay,
    WeatherSnapshot,
)


def make_snapshot(
    city: str,
    *,
    condition: Condition = Condition.SUNNY,
    start: datetime.date = datetime.date(2026, 2, 24),
) -> WeatherSnapshot:
    days = [start + datetime.timedelta(days=offset) for offset in range(7)]
    return WeatherSnapshot(
        city=city,
        current=CurrentConditions(
            temperature=24,
            condition=condition,
            humidity=61,
            wind_speed=14,
            feels_like=26,
            uv_index=7,
            sunrise="6:30 AM",
            sunset="8:15 PM",
        ),
        forecast=tuple(
            ForecastDay(
                day=day,
                date=f"{day:%a, %b} {day.day}",
                temperature=15 + offset,
                condition=Condition.RAINY,
            )
            for offset, day in enumerate(days)
        ),
    )


class GatedSource(WeatherSource):
    """Source whose responses are released manually per city."""

    def __init__(self) -> None:
        self.gates: dict[str, asyncio.Future[WeatherSnapshot]] = {}
        self.calls: list[str] = []

    async def fetch(self, city: str) -> WeatherSnapshot:
        self.calls.append(city)
        gate: asyncio.Future[WeatherSnapshot] = asyncio.get_running_loop().create_future()
        self.gates[city] = gate
        return await gate


class ScriptedSource(WeatherSource):
    """Source returning canned snapshots, failing for "error" like the mock."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    async def fetch(self, city: str) -> WeatherSnapshot:
        self.calls.append(city)
        await asyncio.sleep(0)
        if city.lower() == "error":
            raise CityNotFoundError(city)
        return make_snapshot(city)


@pytest.fixture
def scripted_source() -> ScriptedSource:
    return ScriptedSource()


@pytest.fixture
def clean_env(monkeypatch: Any, tmp_path: Any) -> None:
    """Isolate settings from the developer's environment and `.env`."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "WEATHER_PANEL_DELAY_SECONDS",
        "WEATHER_PANEL_SENTINEL_CITY",
        "WEATHER_PANEL_SEED",
        "WEATHER_PANEL_DEFAULT_TAB",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def gated_source() -> GatedSource:
    return GatedSource()


@pytest.fixture
def snapshot_factory() -> Any:
    return make_snapshot


@pytest.fixture(autouse=True)
def reset_app_logger() -> Iterator[None]:
    """Drop handlers bound to a previous test's captured streams."""
    yield
    logger = logging.getLogger("weather_panel")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
