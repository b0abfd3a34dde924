"""Tagged view states for the weather panel."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ..weather.models import WeatherSnapshot

Tab = Literal["current", "forecast"]
TABS: tuple[Tab, ...] = ("current", "forecast")


@dataclass(frozen=True, slots=True)
class Idle:
    """Nothing submitted yet."""


@dataclass(frozen=True, slots=True)
class Loading:
    """A fetch for `query` is in flight."""

    query: str


@dataclass(frozen=True, slots=True)
class Success:
    snapshot: WeatherSnapshot


@dataclass(frozen=True, slots=True)
class Failure:
    message: str


ViewState = Idle | Loading | Success | Failure


def result_of(state: ViewState) -> WeatherSnapshot | None:
    return state.snapshot if isinstance(state, Success) else None


def error_of(state: ViewState) -> str | None:
    return state.message if isinstance(state, Failure) else None
