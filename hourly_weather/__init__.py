"""Hourly weather forecast widget for the terminal."""

__version__ = "0.1.0"
