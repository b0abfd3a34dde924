"""Randomized stand-in weather source with simulated latency."""

from __future__ import annotations

import asyncio
import datetime
import logging
import random
from collections.abc import Callable

from ..exceptions import CityNotFoundError
from .base import WeatherSource
from .models import FORECAST_DAYS, Condition, CurrentConditions, ForecastDay, WeatherSnapshot

DEFAULT_SENTINEL = "error"
SUNRISE = "6:30 AM"
SUNSET = "8:15 PM"

# Half-open [low, high) integer ranges.
CURRENT_TEMPERATURE_RANGE = (10, 40)
FORECAST_TEMPERATURE_RANGE = (10, 30)
FEELS_LIKE_RANGE = (10, 40)
HUMIDITY_RANGE = (40, 100)
WIND_SPEED_RANGE = (5, 25)
UV_INDEX_RANGE = (0, 11)


def format_forecast_date(day: datetime.date) -> str:
    """Short weekday, month and day of month, e.g. ``Mon, Oct 19``."""
    return f"{day:%a, %b} {day.day}"


class MockWeatherSource(WeatherSource):
    """Sleep, then return independently randomized weather for any city.

    The sentinel city (compared case-insensitively) always fails with
    `CityNotFoundError` after the same delay.
    """

    def __init__(
        self,
        *,
        delay_seconds: float = 1.0,
        sentinel: str = DEFAULT_SENTINEL,
        rng: random.Random | None = None,
        clock: Callable[[], datetime.date] | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if delay_seconds < 0:
            raise ValueError("delay_seconds must be >= 0.")
        self.delay_seconds = delay_seconds
        self.sentinel = sentinel
        self.rng = rng or random.Random()
        self.clock = clock or datetime.date.today
        self.logger = logger or logging.getLogger("weather_panel.weather.mock")

    async def fetch(self, city: str) -> WeatherSnapshot:
        await asyncio.sleep(self.delay_seconds)
        if city.lower() == self.sentinel.lower():
            self.logger.info("Mock source rejecting sentinel city %r.", city)
            raise CityNotFoundError(city)

        today = self.clock()
        forecast = tuple(
            self._forecast_day(today + datetime.timedelta(days=offset))
            for offset in range(FORECAST_DAYS)
        )
        snapshot = WeatherSnapshot(city=city, current=self._current(), forecast=forecast)
        self.logger.debug(
            "Mock snapshot generated: city=%r condition=%s",
            city,
            snapshot.current.condition.value,
        )
        return snapshot

    def _current(self) -> CurrentConditions:
        return CurrentConditions(
            temperature=self._draw(CURRENT_TEMPERATURE_RANGE),
            condition=self._condition(),
            humidity=self._draw(HUMIDITY_RANGE),
            wind_speed=self._draw(WIND_SPEED_RANGE),
            feels_like=self._draw(FEELS_LIKE_RANGE),
            uv_index=self._draw(UV_INDEX_RANGE),
            sunrise=SUNRISE,
            sunset=SUNSET,
        )

    def _forecast_day(self, day: datetime.date) -> ForecastDay:
        return ForecastDay(
            day=day,
            date=format_forecast_date(day),
            temperature=self._draw(FORECAST_TEMPERATURE_RANGE),
            condition=self._condition(),
        )

    def _draw(self, bounds: tuple[int, int]) -> int:
        low, high = bounds
        return self.rng.randrange(low, high)

    def _condition(self) -> Condition:
        return self.rng.choice(list(Condition))
