"""Hourly forecast panel component."""

from textual.app import ComposeResult
from textual.widgets import Label, Static

from ..models.config import ForecastConfig
from ..models.forecast import DisplayRow, FadeTier

# Terminal stand-ins for the weather-icons font, keyed by class without day/night prefix
ICON_GLYPHS = {
    "sunny": "☀️",
    "clear": "🌙",
    "sunny-overcast": "⛅",
    "partly-cloudy": "☁️",
    "cloudy": "☁️",
    "windy": "💨",
    "cloudy-windy": "💨",
    "snow": "❄️",
    "snow-wind": "❄️",
    "rain-mix": "🌨️",
    "sleet": "🌨️",
    "rain": "🌧️",
    "showers": "🌦️",
    "thunderstorm": "⛈️",
    "fog": "🌫️",
    "tornado": "🌪️",
    "hurricane": "🌀",
    "hurricane-warning": "🌀",
    "dust": "🌫️",
    "smoke": "🌫️",
    "haze": "🌫️",
    "hot": "🔥",
    "cold": "🥶",
}
DEFAULT_GLYPH = "·"

FADE_STYLES = {
    FadeTier.DARK: "dim",
    FadeTier.DARKER: "dim italic",
}


def icon_glyph(icon_class: str) -> str:
    """Map a weather-icons class such as ``wi-night-clear`` to a glyph."""
    for prefix in ("wi-day-", "wi-night-", "wi-"):
        if icon_class.startswith(prefix):
            return ICON_GLYPHS.get(icon_class[len(prefix) :], DEFAULT_GLYPH)
    return DEFAULT_GLYPH


def render_row(row: DisplayRow, config: ForecastConfig) -> str:
    """Render one forecast row as a markup line."""
    parts = []
    if config.show_day_in_row:
        parts.append(f"{row.day_label:<3}")
    parts.append(f"{row.hour_label(config.use_24_hour):>5}")
    if config.show_icon_in_row:
        parts.append(icon_glyph(row.icon_class))
    if config.show_precipitation_possibility_in_row:
        parts.append(f"{row.precipitation_label:>4}")
    parts.append(f"{row.temperature_label(config.temp_decimal_places):>5}")

    line = "  ".join(parts)
    style = FADE_STYLES.get(row.fade_tier)
    if style:
        return f"[{style}]{line}[/{style}]"
    return line


class HourlyForecastPanel(Static):
    """Panel displaying the hourly forecast table."""

    DEFAULT_CSS = """
    HourlyForecastPanel {
        height: auto;
        border: solid $primary;
        padding: 0 1;
    }

    HourlyForecastPanel #forecast-error {
        color: $error;
        display: none;
    }

    HourlyForecastPanel #forecast-error.visible {
        display: block;
    }

    HourlyForecastPanel #forecast-empty {
        color: $text-muted;
        display: none;
    }

    HourlyForecastPanel #forecast-empty.visible {
        display: block;
    }
    """

    def __init__(self, title: str = "Hourly Forecast") -> None:
        super().__init__()
        self._title = title
        self._loading = True
        self._rows: list[DisplayRow] = []

    def compose(self) -> ComposeResult:
        yield Static("Loading...", id="forecast-header")
        yield Label("", id="forecast-error")
        yield Label("", id="forecast-empty")
        yield Static("", id="forecast-rows")

    def set_loading(self, loading: bool) -> None:
        """Set loading state, keeping the last rows on screen."""
        self._loading = loading
        if loading and not self._rows:
            self.query_one("#forecast-header", Static).update("[dim]Loading...[/dim]")

    def set_error(self, error: str) -> None:
        """Display an error message."""
        self._loading = False
        self.query_one("#forecast-header", Static).update(f"[bold]{self._title}[/bold]")
        error_label = self.query_one("#forecast-error", Label)
        error_label.update(f"[red]{error}[/red]")
        error_label.add_class("visible")
        self.query_one("#forecast-empty", Label).remove_class("visible")

    def set_empty(self, message: str = "Weather disabled") -> None:
        """Display empty state message."""
        self._loading = False
        self._rows = []
        self.query_one("#forecast-header", Static).update(f"[bold]{self._title}[/bold]")
        self.query_one("#forecast-error", Label).remove_class("visible")
        empty_label = self.query_one("#forecast-empty", Label)
        empty_label.update(f"[dim]{message}[/dim]")
        empty_label.add_class("visible")
        self.query_one("#forecast-rows", Static).update("")

    def update_rows(self, rows: list[DisplayRow], config: ForecastConfig) -> None:
        """Update panel with freshly selected rows."""
        self._rows = rows
        self._loading = False

        self.query_one("#forecast-header", Static).update(
            f"[bold]{config.location_name}[/bold]  [dim]{self._title}[/dim]"
        )
        self.query_one("#forecast-error", Label).remove_class("visible")
        self.query_one("#forecast-empty", Label).remove_class("visible")

        rows_widget = self.query_one("#forecast-rows", Static)
        if not rows:
            rows_widget.update("[dim]No upcoming hours[/dim]")
            return
        rows_widget.update("\n".join(render_row(row, config) for row in rows))
