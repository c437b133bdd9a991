"""Status bar showing forecast refresh status and keyboard hints."""

from datetime import datetime, timedelta

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


def refreshed_text(last_refresh: datetime, now: datetime) -> str:
    minutes = int((now - last_refresh).total_seconds() // 60)
    if minutes == 0:
        return "Updated just now"
    if minutes == 1:
        return "Updated 1 min ago"
    return f"Updated {minutes} mins ago"


def countdown_text(next_refresh: datetime, now: datetime) -> str:
    remaining = (next_refresh - now).total_seconds()
    if remaining <= 0:
        return "Refreshing..."
    minutes, seconds = divmod(int(remaining), 60)
    if minutes > 0:
        return f"Next: {minutes}m {seconds}s"
    return f"Next: {seconds}s"


class StatusBar(Horizontal):
    """Bottom status bar with clock, refresh info and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar Static {
        width: auto;
        padding-right: 2;
    }

    StatusBar #status-activity {
        color: $warning;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_refresh: datetime | None = None
        self._next_refresh: datetime | None = None

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-refresh")
        yield Static("", id="status-next-refresh")
        yield Static("", id="status-activity")
        yield Static("", id="status-spacer")
        yield Static("[dim]r[/dim] Refresh  [dim]q[/dim] Quit", id="status-hints")

    def on_mount(self) -> None:
        """Start clock update timer."""
        self.set_interval(1, self._update_time)

    def _update_time(self) -> None:
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")

        if self._last_refresh:
            self.query_one("#status-refresh", Static).update(
                f"[dim]{refreshed_text(self._last_refresh, now)}[/dim]"
            )

        next_widget = self.query_one("#status-next-refresh", Static)
        if self._next_refresh:
            next_widget.update(f"[dim]{countdown_text(self._next_refresh, now)}[/dim]")
        else:
            next_widget.update("")

    def set_last_refresh(self, time: datetime | None = None) -> None:
        """Update the last refresh timestamp."""
        self._last_refresh = time or datetime.now()
        self._update_time()

    def set_next_refresh(self, interval_minutes: int = 0) -> None:
        """Schedule the countdown; zero disables it."""
        if interval_minutes > 0:
            self._next_refresh = datetime.now() + timedelta(minutes=interval_minutes)
        else:
            self._next_refresh = None
        self._update_time()

    def set_activity(self, activity: str) -> None:
        """Set current activity message (e.g., 'Fetching forecast...')."""
        self.query_one("#status-activity", Static).update(
            f"[yellow]{activity}[/yellow]" if activity else ""
        )

    def clear_activity(self) -> None:
        """Clear activity message."""
        self.set_activity("")
