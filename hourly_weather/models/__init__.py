"""Data models for the hourly forecast."""

from .config import Config, ForecastConfig, Settings
from .forecast import (
    DisplayRow,
    FadeTier,
    ForecastPayload,
    HourlyPeriod,
    PrecipitationInterval,
    RawPrecipitation,
)

__all__ = [
    "Config",
    "DisplayRow",
    "FadeTier",
    "ForecastConfig",
    "ForecastPayload",
    "HourlyPeriod",
    "PrecipitationInterval",
    "RawPrecipitation",
    "Settings",
]
