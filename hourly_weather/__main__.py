"""Entry point for running the forecast widget as a module."""

import argparse
import asyncio
import atexit
import logging
import signal
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.markup import render

from .app import ForecastApp
from .components.forecast_panel import render_row
from .models.config import Config
from .services.pipeline import build_rows
from .services.weather_service import WeatherService

# Global reference for signal handlers
_app: ForecastApp | None = None
_logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    """Configure logging with rotation support.

    Args:
        log_level: The logging level (DEBUG, INFO, WARNING, ERROR)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    file_error = None
    log_dir = Path("logs")
    try:
        log_dir.mkdir(exist_ok=True)
        # Rotate at 10MB, keep 5 backup files
        file_handler = RotatingFileHandler(
            log_dir / "hourly_weather.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        handlers.append(file_handler)
    except (PermissionError, OSError) as e:
        file_error = e

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    if file_error is not None:
        _logger.debug(f"File logging disabled: {file_error}")


def _signal_handler(signum: int, frame: object) -> None:
    """Handle shutdown signals gracefully.

    Args:
        signum: Signal number received
        frame: Current stack frame (unused)
    """
    signal_name = signal.Signals(signum).name
    _logger.info(f"Received {signal_name}, shutting down gracefully...")

    if _app is not None:
        _app.exit()


def _cleanup() -> None:
    """Cleanup handler called on exit."""
    _logger.info("Hourly Weather shutdown complete")


def setup_signal_handlers() -> None:
    """Set up signal handlers for graceful shutdown."""
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)
    atexit.register(_cleanup)


def print_forecast(config: Config) -> int:
    """Fetch once and print the rows as plain text. Returns an exit code."""
    service = WeatherService(user_agent=config.settings.user_agent)
    payload = asyncio.run(service.fetch_forecast(config.weather))
    if payload.error:
        print(f"Error: {payload.error}", file=sys.stderr)
        return 1

    rows = build_rows(payload, datetime.now(timezone.utc), config.weather)
    print(config.weather.location_name)
    if not rows:
        print("No upcoming hours")
    for row in rows:
        print(render(render_row(row, config.weather)).plain)
    return 0


def main() -> None:
    """Main entry point."""
    global _app

    parser = argparse.ArgumentParser(
        description="Hourly Weather - a terminal widget showing the next hours of forecast"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path("config.json"),
        help="Path to configuration file (default: config.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version and exit",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Print the forecast once instead of starting the widget",
    )

    args = parser.parse_args()

    if args.version:
        from . import __version__

        print(f"Hourly Weather v{__version__}")
        sys.exit(0)

    config = Config.load_or_default(args.config)

    log_level = "DEBUG" if args.verbose else config.settings.log_level
    setup_logging(log_level)

    if args.once:
        sys.exit(print_forecast(config))

    setup_signal_handlers()

    _logger.info("Starting Hourly Weather")

    if not args.config.exists():
        print(f"Config file not found: {args.config}")
        print("\nStarting with default configuration (Washington, DC via weather.gov)...")

    _app = ForecastApp(config=config)
    _app.run()


if __name__ == "__main__":
    main()
