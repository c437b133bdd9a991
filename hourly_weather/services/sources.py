"""Parse provider responses into forecast payloads."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import ValidationError

from ..models.forecast import ForecastPayload, HourlyPeriod, RawPrecipitation

logger = logging.getLogger(__name__)


class SourceError(ValueError):
    """Raised when a provider response does not have the expected shape."""


def parse_nws(hourly: dict[str, Any], gridpoint: dict[str, Any] | None = None) -> ForecastPayload:
    """Parse the NWS hourly forecast and gridpoint documents.

    The hourly forecast supplies the periods. The gridpoint document supplies
    ``probabilityOfPrecipitation`` intervals; when it has none every hour
    reads 0%.
    """
    try:
        periods = hourly["properties"]["periods"]
    except (KeyError, TypeError) as e:
        raise SourceError(f"Hourly forecast has no periods: {e}") from e
    if not isinstance(periods, list):
        raise SourceError(f"Hourly forecast periods is not a list: {type(periods).__name__}")

    try:
        hours = [HourlyPeriod.model_validate(period) for period in periods]
    except ValidationError as e:
        raise SourceError(f"Invalid hourly period: {e}") from e

    values = None
    if gridpoint:
        try:
            pop = (gridpoint.get("properties") or {}).get("probabilityOfPrecipitation") or {}
            values = pop.get("values")
        except AttributeError as e:
            raise SourceError(f"Invalid gridpoint document: {e}") from e
        if values is not None and not isinstance(values, list):
            raise SourceError(f"Precipitation values is not a list: {type(values).__name__}")

    precipitation = []
    for value in values or []:
        try:
            precipitation.append(RawPrecipitation.model_validate(value))
        except ValidationError as e:
            logger.debug(f"Ignoring precipitation value {value!r}: {e}")

    return ForecastPayload(source="nws", hourly=hours, precipitation=precipitation)


def _onecall_period(hour: dict[str, Any], tz: timezone) -> HourlyPeriod:
    weather = (hour.get("weather") or [{}])[0]
    icon = weather.get("icon", "")
    pop = hour.get("pop")

    return HourlyPeriod(
        start_time=datetime.fromtimestamp(hour["dt"], tz=tz),
        temperature=hour["temp"],
        icon=icon,
        is_daytime=not icon.endswith("n"),
        precipitation_probability=round(pop * 100) if pop is not None else None,
        weather_class=weather.get("weatherClass"),
    )


def parse_onecall(data: dict[str, Any]) -> ForecastPayload:
    """Parse an OpenWeatherMap One Call response.

    Each hour carries its own probability of precipitation as a fraction, so
    no interval records are produced.
    """
    try:
        tz = timezone(timedelta(seconds=data.get("timezone_offset", 0)))
        hours = [_onecall_period(hour, tz) for hour in data["hourly"]]
    except (AttributeError, KeyError, TypeError, ValueError, OverflowError) as e:
        raise SourceError(f"Invalid One Call response: {e}") from e

    return ForecastPayload(source="onecall", hourly=hours)
