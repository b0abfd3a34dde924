"""Typed models for mock weather snapshots."""

from __future__ import annotations

import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

FORECAST_DAYS = 7


class Condition(str, Enum):
    """Closed set of weather states driving icon and background choice."""

    SUNNY = "Sunny"
    CLOUDY = "Cloudy"
    RAINY = "Rainy"


class CurrentConditions(BaseModel):
    """Current conditions for one city."""

    model_config = ConfigDict(frozen=True)

    temperature: int = Field(description="Air temperature in degrees Celsius")
    condition: Condition
    humidity: int = Field(ge=0, le=100, description="Relative humidity percent")
    wind_speed: int = Field(ge=0, description="Wind speed in km/h")
    feels_like: int = Field(description="Apparent temperature in degrees Celsius")
    uv_index: int = Field(ge=0, le=10)
    sunrise: str
    sunset: str


class ForecastDay(BaseModel):
    """One forecast entry; `date` is the display label for `day`."""

    model_config = ConfigDict(frozen=True)

    day: datetime.date
    date: str
    temperature: int
    condition: Condition


class WeatherSnapshot(BaseModel):
    """Complete result (current + forecast) for one query."""

    model_config = ConfigDict(frozen=True)

    city: str
    current: CurrentConditions
    forecast: tuple[ForecastDay, ...]

    @model_validator(mode="after")
    def validate_forecast(self) -> WeatherSnapshot:
        """Forecast must be one entry per consecutive calendar day."""
        if len(self.forecast) != FORECAST_DAYS:
            raise ValueError(
                f"forecast must have {FORECAST_DAYS} entries, got {len(self.forecast)}."
            )
        for previous, following in zip(self.forecast, self.forecast[1:]):
            if following.day - previous.day != datetime.timedelta(days=1):
                raise ValueError("forecast days must be consecutive and chronological.")
        return self
