"""Textual application hosting the hourly forecast widget."""

import logging
from datetime import datetime, timezone
from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.timer import Timer

from .components import HourlyForecastPanel, StatusBar
from .models.config import Config
from .models.forecast import ForecastPayload
from .services.pipeline import build_rows
from .services.weather_service import WeatherService

logger = logging.getLogger(__name__)

# Rows are re-selected this often so hours drop off as they pass
RENDER_INTERVAL_SECONDS = 60


class ForecastApp(App):
    """Terminal widget showing the next hours of forecast."""

    TITLE = "Hourly Weather"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main {
        height: 1fr;
        padding: 1 2;
    }
    """

    BINDINGS = [
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, config_path: Path | str = "config.json", config: Config | None = None):
        super().__init__()
        self.config = config or Config.load_or_default(config_path)
        self.weather_service = WeatherService(user_agent=self.config.settings.user_agent)
        self._payload: ForecastPayload | None = None
        self._retry_timer: Timer | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="main"):
            yield HourlyForecastPanel()
        yield StatusBar()

    def on_mount(self) -> None:
        weather = self.config.weather
        if not weather.enabled:
            self.query_one(HourlyForecastPanel).set_empty()
            return

        self.set_timer(weather.initial_load_delay_seconds, self.action_refresh)
        self.set_interval(weather.update_interval_minutes * 60, self.action_refresh)
        self.set_interval(RENDER_INTERVAL_SECONDS, self.render_forecast)

    def action_refresh(self) -> None:
        """Fetch a new forecast; a newer refresh replaces one still running."""
        if self._retry_timer is not None:
            self._retry_timer.stop()
            self._retry_timer = None
        self.run_worker(self._refresh(), exclusive=True, group="forecast")

    async def _refresh(self) -> None:
        weather = self.config.weather
        panel = self.query_one(HourlyForecastPanel)
        status = self.query_one(StatusBar)

        panel.set_loading(True)
        status.set_activity("Fetching forecast...")
        payload = await self.weather_service.fetch_forecast(weather)
        status.clear_activity()

        if payload.error:
            logger.warning(f"Forecast refresh failed: {payload.error}")
            panel.set_error(payload.error)
            self._retry_timer = self.set_timer(weather.retry_delay_seconds, self.action_refresh)
            return

        self._payload = payload
        self.render_forecast()
        status.set_last_refresh()
        status.set_next_refresh(interval_minutes=weather.update_interval_minutes)

    def render_forecast(self) -> None:
        """Select rows from the latest payload as of now."""
        if self._payload is None:
            return

        rows = build_rows(self._payload, datetime.now(timezone.utc), self.config.weather)
        self.query_one(HourlyForecastPanel).update_rows(rows, self.config.weather)
