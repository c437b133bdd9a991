"""Pytest configuration and fixtures."""

import json
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from hourly_weather.models.forecast import HourlyPeriod

NOW = datetime(2024, 3, 4, 10, 30, tzinfo=timezone.utc)  # A Monday


def _make_period(start_time: datetime, **kwargs) -> HourlyPeriod:
    """Build an hourly period with sensible defaults."""
    values = {"temperature": 50.0, "icon": "https://api.weather.gov/icons/land/day/skc?size=small"}
    values.update(kwargs)
    return HourlyPeriod(start_time=start_time, **values)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_period():
    """Factory for hourly periods."""
    return _make_period


@pytest.fixture
def now():
    """A fixed current instant."""
    return NOW


@pytest.fixture
def hourly_periods():
    """Twenty periods on the hour, starting at 10:00 (already started)."""
    start = NOW.replace(minute=0)
    return [_make_period(start + timedelta(hours=i), temperature=40.0 + i) for i in range(20)]


@pytest.fixture
def nws_hourly_data():
    """Trimmed NWS hourly forecast document."""
    return {
        "properties": {
            "periods": [
                {
                    "number": 1,
                    "startTime": "2024-03-04T11:00:00+00:00",
                    "endTime": "2024-03-04T12:00:00+00:00",
                    "isDaytime": True,
                    "temperature": 51,
                    "temperatureUnit": "F",
                    "icon": "https://api.weather.gov/icons/land/day/few?size=small",
                },
                {
                    "number": 2,
                    "startTime": "2024-03-04T12:00:00+00:00",
                    "endTime": "2024-03-04T13:00:00+00:00",
                    "isDaytime": True,
                    "temperature": 53,
                    "temperatureUnit": "F",
                    "icon": "https://api.weather.gov/icons/land/day/rain_showers,40?size=small",
                },
                {
                    "number": 3,
                    "startTime": "2024-03-04T13:00:00+00:00",
                    "endTime": "2024-03-04T14:00:00+00:00",
                    "isDaytime": True,
                    "temperature": 54,
                    "temperatureUnit": "F",
                    "icon": "https://api.weather.gov/icons/land/day/ovc?size=small",
                },
            ]
        }
    }


@pytest.fixture
def nws_gridpoint_data():
    """Trimmed NWS gridpoint document with precipitation intervals."""
    return {
        "properties": {
            "probabilityOfPrecipitation": {
                "uom": "wmoUnit:percent",
                "values": [
                    {"validTime": "2024-03-04T12:00:00+00:00/PT1H", "value": 40},
                    {"validTime": "2024-03-04T14:00:00+00:00/PT3H", "value": 70},
                ],
            }
        }
    }


@pytest.fixture
def onecall_data():
    """Trimmed OpenWeatherMap One Call document."""
    return {
        "lat": 38.89,
        "lon": -77.04,
        "timezone": "America/New_York",
        "timezone_offset": -18000,
        "hourly": [
            {
                "dt": 1709550000,  # 2024-03-04T11:00:00Z
                "temp": 10.4,
                "pop": 0.25,
                "weather": [{"id": 500, "main": "Rain", "icon": "10d"}],
            },
            {
                "dt": 1709553600,
                "temp": 11.6,
                "weather": [{"id": 800, "main": "Clear", "icon": "01n", "weatherClass": "wi-night-clear"}],
            },
        ],
    }


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "weather": {
            "enabled": True,
            "source": "nws",
            "location_name": "Boston",
            "latitude": 42.3601,
            "longitude": -71.0589,
            "maxHoursForecast": 6,
            "skipHours": 1,
            "fadeForecast": False,
            "timeFormat": 12,
        },
        "settings": {
            "user_agent": "test-agent",
            "log_level": "DEBUG",
        },
    }


@pytest.fixture
def sample_config_file(temp_dir, sample_config_data):
    """Create a sample config file for testing."""
    config_path = temp_dir / "config.json"
    with open(config_path, "w") as f:
        json.dump(sample_config_data, f)
    return config_path
