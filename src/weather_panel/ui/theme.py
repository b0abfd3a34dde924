"""Condition-keyed styles and icons for terminal rendering."""

from __future__ import annotations

from typing import Any

from ..weather.models import Condition

NEUTRAL_BACKGROUND = "on #bfdbfe"
DEFAULT_BACKGROUND = "on #93c5fd"

_BACKGROUNDS = {
    Condition.SUNNY: "on #fdba74",
    Condition.CLOUDY: "on #d1d5db",
    Condition.RAINY: "on #60a5fa",
}
_BORDERS = {
    Condition.SUNNY: "yellow",
    Condition.CLOUDY: "grey62",
    Condition.RAINY: "blue",
}
_ICONS = {
    Condition.SUNNY: ("☀", "yellow"),
    Condition.CLOUDY: ("☁", "grey50"),
    Condition.RAINY: ("🌧", "blue"),
}
_DEFAULT_ICON = ("☁", "grey50")


def _as_condition(value: Any) -> Condition | None:
    if isinstance(value, Condition):
        return value
    try:
        return Condition(value)
    except ValueError:
        return None


def background_style(condition: Any | None) -> str:
    """Background for the panel; neutral before any fetch."""
    if condition is None:
        return NEUTRAL_BACKGROUND
    return _BACKGROUNDS.get(_as_condition(condition), DEFAULT_BACKGROUND)


def border_style(condition: Any | None) -> str:
    if condition is None:
        return "bright_blue"
    return _BORDERS.get(_as_condition(condition), "blue")


def weather_icon(condition: Any | None) -> tuple[str, str]:
    """Return `(glyph, style)`; unrecognized values fall back to a cloud."""
    return _ICONS.get(_as_condition(condition), _DEFAULT_ICON)
