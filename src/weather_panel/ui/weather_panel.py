"""Rich-rendered weather panel with current and forecast tabs."""

from __future__ import annotations

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..weather.models import CurrentConditions, WeatherSnapshot
from .state import Failure, Loading, Success, Tab, ViewState
from .theme import background_style, border_style, weather_icon

TAB_LABELS: dict[Tab, str] = {
    "current": "Current Weather",
    "forecast": "7-Day Forecast",
}
NARROW_WIDTH = 80


class WeatherPanelRenderer:
    """Turn a view state into one bordered panel."""

    def __init__(self, *, title: str = "Weather API", placeholder: str = "Enter city name") -> None:
        self.title = title
        self.placeholder = placeholder

    def build(
        self,
        *,
        state: ViewState,
        query: str,
        selected_tab: Tab,
        width: int | None = None,
    ) -> Panel:
        narrow = width is not None and width < NARROW_WIDTH
        condition = state.snapshot.current.condition if isinstance(state, Success) else None

        parts: list[RenderableType] = [
            self._build_search_row(query=query, loading=isinstance(state, Loading))
        ]
        if isinstance(state, Failure):
            parts.append(Text(state.message, style="bold red", justify="center"))
        if isinstance(state, Success):
            parts.append(self._build_tab_bar(selected_tab))
            if selected_tab == "forecast":
                parts.append(self._build_forecast_panel(state.snapshot, narrow=narrow))
            else:
                parts.append(self._build_current_panel(state.snapshot, narrow=narrow))

        return Panel(
            Group(*parts),
            title=Text(self.title, style="bold"),
            border_style=border_style(condition),
            style=background_style(condition),
            width=width,
        )

    def _build_search_row(self, *, query: str, loading: bool) -> Table:
        table = Table.grid(padding=(0, 1), expand=True)
        table.add_column(ratio=1)
        table.add_column(justify="right", no_wrap=True)
        if query:
            field = Text(f"[ {query} ]")
        else:
            field = Text(f"[ {self.placeholder} ]", style="dim italic")
        if loading:
            button = Text("( Loading... )", style="dim")
        else:
            button = Text("( Search )", style="bold")
        table.add_row(field, button)
        return table

    def _build_tab_bar(self, selected_tab: Tab) -> Text:
        bar = Text(justify="center")
        for index, (tab, label) in enumerate(TAB_LABELS.items()):
            if index:
                bar.append("  |  ", style="dim")
            style = "bold reverse" if tab == selected_tab else "dim"
            bar.append(f" {label} ", style=style)
        return bar

    def _build_current_panel(self, snapshot: WeatherSnapshot, *, narrow: bool) -> Panel:
        current = snapshot.current
        glyph, glyph_style = weather_icon(current.condition)
        headline = Text()
        headline.append(f"{current.temperature}°C", style="bold")
        headline.append("  ")
        headline.append(glyph, style=glyph_style)

        body = Group(
            Text(snapshot.city, style="bold underline"),
            headline,
            Text(current.condition.value),
            self._build_details_grid(current, narrow=narrow),
        )
        return Panel(body, border_style="white")

    @staticmethod
    def _build_details_grid(current: CurrentConditions, *, narrow: bool) -> Table:
        details = [
            f"Feels like: {current.feels_like}°C",
            f"Humidity: {current.humidity}%",
            f"Wind: {current.wind_speed} km/h",
            f"UV Index: {current.uv_index}",
            f"Sunrise: {current.sunrise}",
            f"Sunset: {current.sunset}",
        ]
        table = Table.grid(padding=(0, 4))
        columns = 1 if narrow else 2
        for _ in range(columns):
            table.add_column()
        for start in range(0, len(details), columns):
            table.add_row(*details[start : start + columns])
        return table

    @staticmethod
    def _build_forecast_panel(snapshot: WeatherSnapshot, *, narrow: bool) -> Panel:
        table = Table(show_header=True, header_style="bold", expand=not narrow)
        table.add_column("Date", no_wrap=True)
        table.add_column("Temp", justify="right")
        table.add_column("", width=2)
        table.add_column("Condition")
        for day in snapshot.forecast:
            glyph, glyph_style = weather_icon(day.condition)
            table.add_row(
                day.date,
                f"{day.temperature}°C",
                Text(glyph, style=glyph_style),
                day.condition.value,
            )
        return Panel(table, title="7-Day Forecast", border_style="white")
