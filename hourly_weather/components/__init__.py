"""UI components for the forecast widget."""

from .forecast_panel import HourlyForecastPanel
from .status_bar import StatusBar

__all__ = ["HourlyForecastPanel", "StatusBar"]
