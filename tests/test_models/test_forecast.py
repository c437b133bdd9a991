"""Tests for forecast models."""

from datetime import datetime, timedelta, timezone

import pytest

from hourly_weather.models.forecast import DisplayRow, FadeTier, HourlyPeriod, PrecipitationInterval


def row_for(start_time=None, **kwargs) -> DisplayRow:
    period = HourlyPeriod(
        start_time=start_time or datetime(2024, 3, 4, 15, tzinfo=timezone.utc),
        temperature=kwargs.pop("temperature", 50.0),
        **kwargs,
    )
    return DisplayRow(period=period, icon_class="wi-day-sunny")


class TestHourlyPeriod:
    """Tests for HourlyPeriod model."""

    def test_from_wire_names(self):
        """Test a provider period parses from camelCase keys."""
        period = HourlyPeriod.model_validate(
            {
                "startTime": "2024-03-04T15:00:00-05:00",
                "temperature": 41,
                "icon": "https://api.weather.gov/icons/land/day/bkn?size=small",
                "isDaytime": True,
            }
        )
        assert period.start_time.utcoffset() == timedelta(hours=-5)
        assert period.temperature == 41
        assert period.is_daytime is True
        assert period.precipitation_probability is None
        assert period.weather_class is None

    def test_naive_start_time_is_utc(self):
        """Test naive start times get a UTC offset."""
        period = HourlyPeriod(start_time=datetime(2024, 3, 4, 15), temperature=1)
        assert period.start_time.tzinfo is timezone.utc


class TestPrecipitationInterval:
    """Tests for PrecipitationInterval model."""

    def test_contains_is_inclusive(self):
        """Test both ends are inside the interval."""
        start = datetime(2024, 3, 4, 12, tzinfo=timezone.utc)
        interval = PrecipitationInterval(start=start, end=start + timedelta(hours=1), value=10)
        assert interval.contains(start)
        assert interval.contains(start + timedelta(hours=1))
        assert not interval.contains(start + timedelta(hours=1, seconds=1))
        assert not interval.contains(start - timedelta(seconds=1))


class TestDisplayRow:
    """Tests for DisplayRow display helpers."""

    def test_defaults(self):
        """Test rows default to no label and no fading."""
        row = row_for()
        assert row.day_label == ""
        assert row.fade_tier is FadeTier.NONE

    def test_precipitation_label(self):
        """Test known values show a percentage."""
        assert row_for(precipitation_probability=40).precipitation_label == "40%"
        assert row_for(precipitation_probability=0).precipitation_label == "0%"
        assert row_for(precipitation_probability=12.5).precipitation_label == "12.5%"

    def test_precipitation_unavailable(self):
        """Test a missing value is N/A, not 0%."""
        assert row_for().precipitation_label == "N/A"

    @pytest.mark.parametrize(
        "hour,expected_24,expected_12",
        [
            (0, "0:00", "12am"),
            (9, "9:00", "9am"),
            (12, "12:00", "12pm"),
            (23, "23:00", "11pm"),
        ],
    )
    def test_hour_label(self, hour, expected_24, expected_12):
        """Test 24 and 12 hour formats."""
        row = row_for(datetime(2024, 3, 4, hour, tzinfo=timezone.utc))
        assert row.hour_label(use_24_hour=True) == expected_24
        assert row.hour_label(use_24_hour=False) == expected_12

    def test_hour_label_uses_own_offset(self):
        """Test the hour is read in the period's own timezone."""
        eastern = timezone(timedelta(hours=-5))
        row = row_for(datetime(2024, 3, 4, 6, tzinfo=eastern))
        assert row.hour_label(False) == "6am"

    @pytest.mark.parametrize(
        "temperature,places,expected",
        [
            (72.4, 0, "72°"),
            (72.5, 0, "73°"),
            (-3.5, 0, "-3°"),
            (72.46, 1, "72.5°"),
            (10.0, 2, "10.00°"),
        ],
    )
    def test_temperature_label(self, temperature, places, expected):
        """Test temperatures round half up."""
        assert row_for(temperature=temperature).temperature_label(places) == expected
