"""Weather data model and sources."""

from .base import WeatherSource
from .mock import MockWeatherSource
from .models import Condition, CurrentConditions, ForecastDay, WeatherSnapshot

__all__ = [
    "Condition",
    "CurrentConditions",
    "ForecastDay",
    "MockWeatherSource",
    "WeatherSnapshot",
    "WeatherSource",
]
