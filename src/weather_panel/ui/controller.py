"""Weather view: query text, submission lifecycle and tab selection."""

from __future__ import annotations

import logging

from rich.console import RenderableType

from ..weather.base import WeatherSource
from ..weather.models import WeatherSnapshot
from .state import TABS, Failure, Idle, Loading, Success, Tab, ViewState, error_of, result_of
from .weather_panel import WeatherPanelRenderer

FETCH_FAILED_MESSAGE = "Failed to fetch weather data. Please try again."


class WeatherView:
    """Own the panel state and drive one weather source.

    Each submission moves the view to `Loading` and settles it as `Success`
    or `Failure` once the fetch completes, however it completes. Responses
    from superseded submissions are dropped so the newest query always wins.
    """

    def __init__(
        self,
        *,
        source: WeatherSource,
        renderer: WeatherPanelRenderer | None = None,
        default_tab: Tab = "current",
        logger: logging.Logger | None = None,
    ) -> None:
        if default_tab not in TABS:
            raise ValueError(f"Unknown tab {default_tab!r}; expected one of {TABS}.")
        self.source = source
        self.renderer = renderer or WeatherPanelRenderer()
        self.default_tab: Tab = default_tab
        self.logger = logger or logging.getLogger("weather_panel.ui")
        self.query = ""
        self.state: ViewState = Idle()
        self.selected_tab: Tab = default_tab
        self._sequence = 0

    @property
    def loading(self) -> bool:
        return isinstance(self.state, Loading)

    @property
    def result(self) -> WeatherSnapshot | None:
        return result_of(self.state)

    @property
    def error(self) -> str | None:
        return error_of(self.state)

    @property
    def can_submit(self) -> bool:
        """Mirror of the submit control's enabled state."""
        return not self.loading

    def set_query(self, text: str) -> None:
        self.query = text

    def select_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab {tab!r}; expected one of {TABS}.")
        self.selected_tab = tab  # type: ignore[assignment]

    async def submit(self, query: str | None = None) -> ViewState:
        """Fetch weather for `query` (or the stored query text).

        Never raises for fetch failures; the failure is logged and the
        view settles on the fixed user-facing message. Cancellation still
        settles the view before propagating.
        """
        if query is not None:
            self.query = query
        text = self.query
        self._sequence += 1
        request_id = self._sequence
        self.state = Loading(query=text)
        self.selected_tab = self.default_tab
        self.logger.info("Weather request %d submitted for %r.", request_id, text)

        outcome: ViewState = Failure(message=FETCH_FAILED_MESSAGE)
        try:
            snapshot = await self.source.fetch(text)
        except Exception as exc:
            self.logger.warning("Weather request %d failed: %s", request_id, exc)
        else:
            outcome = Success(snapshot=snapshot)
        finally:
            self._settle(request_id, outcome)
        return self.state

    def _settle(self, request_id: int, outcome: ViewState) -> None:
        if request_id != self._sequence:
            self.logger.debug(
                "Dropping response for superseded request %d (latest=%d).",
                request_id,
                self._sequence,
            )
            return
        self.state = outcome

    def render(self, *, width: int | None = None) -> RenderableType:
        """Build the panel for the current state."""
        return self.renderer.build(
            state=self.state,
            query=self.query,
            selected_tab=self.selected_tab,
            width=width,
        )
