"""Forecast data models."""

import math
from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def as_aware(value: datetime) -> datetime:
    """Return ``value`` with a timezone, assuming UTC for naive datetimes."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class FadeTier(str, Enum):
    """Emphasis level for the trailing rows of the forecast."""

    NONE = "none"
    DARK = "dark"
    DARKER = "darker"


class HourlyPeriod(BaseModel):
    """A single hour of forecast."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    start_time: datetime
    temperature: float
    icon: str = ""
    is_daytime: bool = True
    precipitation_probability: float | None = None
    weather_class: str | None = None  # Pre-classified icon from the provider

    @field_validator("start_time")
    @classmethod
    def validate_start_time(cls, v: datetime) -> datetime:
        """Assume UTC for naive start times so they compare with aware ones."""
        return as_aware(v)


class PrecipitationInterval(BaseModel):
    """Probability of precipitation over an inclusive time span."""

    start: datetime
    end: datetime
    value: float

    @field_validator("start", "end")
    @classmethod
    def validate_bounds(cls, v: datetime) -> datetime:
        return as_aware(v)

    def contains(self, instant: datetime) -> bool:
        return self.start <= as_aware(instant) <= self.end


class RawPrecipitation(BaseModel):
    """Precipitation record as delivered, e.g. ``2024-01-01T12:00:00+00:00/PT3H``."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    valid_time: str
    value: float | None = None


class ForecastPayload(BaseModel):
    """Everything the pipeline needs from one refresh."""

    source: str = ""
    hourly: list[HourlyPeriod] = Field(default_factory=list)
    precipitation: list[RawPrecipitation] | None = None
    fetched_at: datetime = Field(default_factory=datetime.now)
    error: str | None = None


def _round_half_up(value: float, decimal_places: int = 0) -> float:
    scalar = 10**decimal_places
    return math.floor(value * scalar + 0.5) / scalar


class DisplayRow(BaseModel):
    """One rendered line of the hourly forecast."""

    period: HourlyPeriod
    icon_class: str
    day_label: str = ""
    fade_tier: FadeTier = FadeTier.NONE

    @property
    def start_time(self) -> datetime:
        return self.period.start_time

    @property
    def temperature(self) -> float:
        return self.period.temperature

    @property
    def precipitation_label(self) -> str:
        """Return the chance of precipitation, or N/A when the source had none."""
        probability = self.period.precipitation_probability
        if probability is None:
            return "N/A"
        return f"{probability:g}%"

    def hour_label(self, use_24_hour: bool = True) -> str:
        """Return the hour as ``23:00`` or ``11pm``."""
        hour = self.start_time.hour
        if use_24_hour:
            return f"{hour}:00"

        suffix = "pm" if hour > 11 else "am"
        hour = hour % 12
        return f"{hour or 12}{suffix}"

    def temperature_label(self, decimal_places: int = 0) -> str:
        """Return the temperature rounded half-up with a degree sign."""
        decimal_places = max(decimal_places, 0)
        rounded = _round_half_up(self.temperature, decimal_places)
        if decimal_places == 0:
            return f"{int(rounded)}°"
        return f"{rounded:.{decimal_places}f}°"
