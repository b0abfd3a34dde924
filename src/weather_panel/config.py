"""Typed settings loader for the weather panel."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError


class Settings(BaseSettings):
    """Application settings loaded from environment variables and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    delay_seconds: float = Field(default=1.0, alias="WEATHER_PANEL_DELAY_SECONDS")
    sentinel_city: str = Field(default="error", alias="WEATHER_PANEL_SENTINEL_CITY")
    seed: int | None = Field(default=None, alias="WEATHER_PANEL_SEED")
    default_tab: Literal["current", "forecast"] = Field(
        default="current",
        alias="WEATHER_PANEL_DEFAULT_TAB",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        alias="LOG_LEVEL",
    )

    @field_validator("seed", mode="before")
    @classmethod
    def empty_string_to_none(cls, value: Any) -> Any:
        """Treat an empty env-string seed as unset."""
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @model_validator(mode="after")
    def validate_ranges(self) -> Settings:
        """Reject settings the mock source cannot honor."""
        if self.delay_seconds < 0:
            raise ValueError("WEATHER_PANEL_DELAY_SECONDS must be >= 0.")
        if not self.sentinel_city.strip():
            raise ValueError("WEATHER_PANEL_SENTINEL_CITY must not be empty.")
        return self

    def safe_summary(self) -> dict[str, Any]:
        """Return config summary safe for logging."""
        return {
            "delay_seconds": self.delay_seconds,
            "sentinel_city": self.sentinel_city,
            "seeded": self.seed is not None,
            "default_tab": self.default_tab,
            "log_level": self.log_level,
        }


def load_settings() -> Settings:
    """Load and validate settings, raising ConfigError on failure."""
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Failed reading environment/.env: {exc}") from exc
