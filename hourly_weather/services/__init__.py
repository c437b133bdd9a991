"""Services for fetching forecasts and turning them into display rows."""

from .icons import classify
from .pipeline import build_rows
from .precipitation import find_precip
from .selector import select
from .weather_service import WeatherService

__all__ = ["WeatherService", "build_rows", "classify", "find_precip", "select"]
