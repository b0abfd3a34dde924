"""Terminal presentation layer for the weather panel."""

from .controller import FETCH_FAILED_MESSAGE, WeatherView
from .state import Failure, Idle, Loading, Success, ViewState
from .weather_panel import WeatherPanelRenderer

__all__ = [
    "FETCH_FAILED_MESSAGE",
    "Failure",
    "Idle",
    "Loading",
    "Success",
    "ViewState",
    "WeatherPanelRenderer",
    "WeatherView",
]
