"""Source-agnostic weather interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .models import WeatherSnapshot


class WeatherSource(ABC):
    """Contract the weather view depends on for snapshots."""

    @abstractmethod
    async def fetch(self, city: str) -> WeatherSnapshot:
        """Fetch a complete snapshot for `city`.

        Implementations raise `WeatherFetchError` (or a subclass) when no
        snapshot can be produced.
        """
