"""Application exception classes."""


class ConfigError(Exception):
    """Raised when configuration is invalid or incomplete."""


class WeatherFetchError(Exception):
    """Raised when a weather source cannot produce a snapshot."""


class CityNotFoundError(WeatherFetchError):
    """Raised when the requested city is unknown to the weather source."""

    def __init__(self, city: str) -> None:
        super().__init__("City not found")
        self.city = city
