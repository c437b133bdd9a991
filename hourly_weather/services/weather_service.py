"""Weather service for the NWS and OpenWeatherMap One Call APIs."""

import asyncio
import logging
import random
from typing import Any

import httpx

from ..models.config import DEFAULT_USER_AGENT, ForecastConfig
from ..models.forecast import ForecastPayload
from .sources import SourceError, parse_nws, parse_onecall

logger = logging.getLogger(__name__)

# NWS requires a User-Agent but no API key
NWS_POINTS_URL = "https://api.weather.gov/points/{latitude:.4f},{longitude:.4f}"
ONECALL_URL = "https://api.openweathermap.org/data/3.0/onecall"

# Retry configuration
MAX_RETRIES = 3
INITIAL_BACKOFF = 1.0
MAX_BACKOFF = 10.0
BACKOFF_MULTIPLIER = 2.0
RETRYABLE_STATUS_CODES = {429, 500, 502, 503, 504}


def _calculate_backoff(attempt: int) -> float:
    """Calculate backoff time with jitter."""
    backoff = min(INITIAL_BACKOFF * (BACKOFF_MULTIPLIER**attempt), MAX_BACKOFF)
    jitter = 0.5 + random.random()
    return backoff * jitter


class FetchError(Exception):
    """Raised when a request still fails after all retries."""


class WeatherService:
    """Service to fetch hourly forecasts.

    Fetch failures never raise; they come back as a payload with ``error`` set.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        max_retries: int = MAX_RETRIES,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.timeout = timeout
        self.max_retries = max_retries
        self.user_agent = user_agent

    async def fetch_forecast(self, config: ForecastConfig) -> ForecastPayload:
        """Fetch the hourly forecast for the configured location and source."""
        if not config.enabled:
            return ForecastPayload(source=config.source, error="Weather disabled in config")

        if config.source == "onecall" and not config.api_key:
            return ForecastPayload(source=config.source, error="No API key configured for One Call")

        headers = {"User-Agent": self.user_agent, "Accept": "application/geo+json"}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, headers=headers) as client:
                if config.source == "onecall":
                    return await self._fetch_onecall(client, config)
                return await self._fetch_nws(client, config)

        except FetchError as e:
            logger.warning(f"Failed to fetch forecast for {config.location_name}: {e}")
            return ForecastPayload(source=config.source, error=str(e))

        except SourceError as e:
            logger.error(f"Error parsing forecast response: {e}")
            return ForecastPayload(source=config.source, error=f"Parse error: {e}")

    async def _fetch_nws(self, client: httpx.AsyncClient, config: ForecastConfig) -> ForecastPayload:
        points_url = NWS_POINTS_URL.format(latitude=config.latitude, longitude=config.longitude)
        points = await self._get_json(client, points_url)

        if not isinstance(points, dict):
            raise SourceError("Point lookup returned an unexpected document")

        properties = points.get("properties") or {}
        hourly_url = properties.get("forecastHourly")
        grid_url = properties.get("forecastGridData")
        if not hourly_url or not grid_url:
            raise SourceError("Point lookup did not return forecast URLs")

        hourly = await self._get_json(client, hourly_url)
        gridpoint = await self._get_json(client, grid_url)
        return parse_nws(hourly, gridpoint)

    async def _fetch_onecall(
        self, client: httpx.AsyncClient, config: ForecastConfig
    ) -> ForecastPayload:
        params = {
            "lat": config.latitude,
            "lon": config.longitude,
            "appid": config.api_key,
            "units": config.units,
            "exclude": "current,minutely,daily,alerts",
        }
        data = await self._get_json(client, ONECALL_URL, params=params)
        return parse_onecall(data)

    async def _get_json(
        self, client: httpx.AsyncClient, url: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """GET ``url`` and decode JSON, retrying transient failures."""
        last_error: str | None = None

        for attempt in range(self.max_retries + 1):
            try:
                response = await client.get(url, params=params)
                response.raise_for_status()
                return response.json()

            except httpx.TimeoutException:
                last_error = "Request timeout"
                if attempt < self.max_retries:
                    backoff = _calculate_backoff(attempt)
                    logger.debug(f"Forecast timeout, retry {attempt + 1} in {backoff:.1f}s")
                    await asyncio.sleep(backoff)
                    continue
                logger.warning(f"Timeout fetching {url} after retries")

            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                last_error = f"HTTP {status}"

                if status in RETRYABLE_STATUS_CODES and attempt < self.max_retries:
                    backoff = _calculate_backoff(attempt)
                    logger.debug(f"Forecast HTTP {status}, retry {attempt + 1} in {backoff:.1f}s")
                    await asyncio.sleep(backoff)
                    continue
                logger.error(f"HTTP error fetching {url}: {status}")

            except httpx.ConnectError as e:
                last_error = "Connection error"
                if attempt < self.max_retries:
                    backoff = _calculate_backoff(attempt)
                    logger.debug(f"Forecast connection error, retry {attempt + 1} in {backoff:.1f}s")
                    await asyncio.sleep(backoff)
                    continue
                logger.error(f"Connection error fetching {url}: {e}")

            except Exception as e:
                logger.error(f"Error fetching {url}: {e}")
                last_error = str(e)

            break

        raise FetchError(last_error or "Unknown error")
