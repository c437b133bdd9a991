"""Configuration models using Pydantic for validation."""

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_USER_AGENT = "hourly-weather/0.1 (https://github.com/hourly-weather)"


class ForecastConfig(BaseModel):
    """Hourly forecast configuration.

    Keys may be given in snake_case or camelCase (``maxHoursForecast``).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    enabled: bool = True
    source: Literal["nws", "onecall"] = "nws"
    location_name: str = "Washington, DC"
    latitude: float = 38.8894
    longitude: float = -77.0352
    api_key: str = ""  # Only needed for the onecall source
    units: Literal["imperial", "metric"] = "imperial"

    max_hours_forecast: int = 8
    skip_hours: int = 0
    fade_forecast: bool = True
    time_format: int = 24
    twenty_four_hour_time: bool | None = None
    show_precipitation_possibility_in_row: bool = True
    show_day_in_row: bool = True
    show_icon_in_row: bool = True
    temp_decimal_places: int = 0

    update_interval_minutes: int = 10
    initial_load_delay_seconds: float = 3.0
    retry_delay_seconds: float = 2.5

    @field_validator("latitude")
    @classmethod
    def validate_latitude(cls, v: float) -> float:
        """Validate latitude is in valid range."""
        if not -90 <= v <= 90:
            raise ValueError(f"Latitude must be between -90 and 90, got {v}")
        return v

    @field_validator("longitude")
    @classmethod
    def validate_longitude(cls, v: float) -> float:
        """Validate longitude is in valid range."""
        if not -180 <= v <= 180:
            raise ValueError(f"Longitude must be between -180 and 180, got {v}")
        return v

    @field_validator("max_hours_forecast", "skip_hours", "temp_decimal_places")
    @classmethod
    def clamp_non_negative(cls, v: int) -> int:
        """Treat negative window settings as zero instead of rejecting them."""
        return max(v, 0)

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, v: int) -> int:
        """Validate the clock is 12 or 24 hour."""
        if v not in (12, 24):
            raise ValueError(f"Time format must be 12 or 24, got {v}")
        return v

    @field_validator("update_interval_minutes")
    @classmethod
    def validate_update_interval(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"Update interval must be at least 1 minute, got {v}")
        return v

    @property
    def use_24_hour(self) -> bool:
        if self.twenty_four_hour_time is not None:
            return self.twenty_four_hour_time
        return self.time_format == 24


class Settings(BaseModel):
    """General application settings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_agent: str = DEFAULT_USER_AGENT
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class Config(BaseModel):
    """Main configuration model."""

    weather: ForecastConfig = Field(default_factory=ForecastConfig)
    settings: Settings = Field(default_factory=Settings)

    @classmethod
    def load(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration from a JSON file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    @classmethod
    def load_or_default(cls, path: Path | str = "config.json") -> "Config":
        """Load configuration or return default if file doesn't exist."""
        try:
            return cls.load(path)
        except FileNotFoundError:
            return cls()
