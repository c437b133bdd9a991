"""Tests for provider response parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from hourly_weather.services.sources import SourceError, parse_nws, parse_onecall


class TestParseNws:
    """Tests for NWS documents."""

    def test_periods(self, nws_hourly_data, nws_gridpoint_data):
        """Test hourly periods and precipitation records are read."""
        payload = parse_nws(nws_hourly_data, nws_gridpoint_data)

        assert payload.source == "nws"
        assert payload.error is None
        assert len(payload.hourly) == 3
        first = payload.hourly[0]
        assert first.start_time == datetime(2024, 3, 4, 11, tzinfo=timezone.utc)
        assert first.temperature == 51
        assert first.is_daytime is True
        assert first.icon.endswith("/day/few?size=small")
        assert first.precipitation_probability is None

        assert [r.value for r in payload.precipitation] == [40, 70]
        assert payload.precipitation[0].valid_time == "2024-03-04T12:00:00+00:00/PT1H"

    def test_without_gridpoint(self, nws_hourly_data):
        """Test a missing gridpoint document gives an empty interval list."""
        payload = parse_nws(nws_hourly_data, None)
        assert payload.precipitation == []

    def test_gridpoint_without_values(self, nws_hourly_data):
        """Test a gridpoint document lacking precipitation gives an empty list."""
        payload = parse_nws(nws_hourly_data, {"properties": {"probabilityOfPrecipitation": None}})
        assert payload.precipitation == []

    def test_skips_bad_precipitation_records(self, nws_hourly_data):
        """Test records without a validTime are ignored."""
        gridpoint = {
            "properties": {
                "probabilityOfPrecipitation": {
                    "values": [{"value": 10}, {"validTime": "2024-03-04T12:00:00+00:00/PT1H", "value": 20}]
                }
            }
        }
        payload = parse_nws(nws_hourly_data, gridpoint)
        assert [r.value for r in payload.precipitation] == [20]

    def test_missing_periods(self):
        """Test a document without periods raises SourceError."""
        with pytest.raises(SourceError, match="no periods"):
            parse_nws({"properties": {}})

    def test_invalid_period(self):
        """Test an unparseable period raises SourceError."""
        with pytest.raises(SourceError, match="Invalid hourly period"):
            parse_nws({"properties": {"periods": [{"startTime": "soon", "temperature": 3}]}})

    def test_null_periods(self):
        """Test a null periods list raises SourceError."""
        with pytest.raises(SourceError, match="not a list"):
            parse_nws({"properties": {"periods": None}})

    @pytest.mark.parametrize(
        "gridpoint",
        [
            [1],
            {"properties": [1]},
            {"properties": {"probabilityOfPrecipitation": {"values": "none"}}},
        ],
    )
    def test_malformed_gridpoint(self, nws_hourly_data, gridpoint):
        """Test a gridpoint document of the wrong shape raises SourceError."""
        with pytest.raises(SourceError):
            parse_nws(nws_hourly_data, gridpoint)


class TestParseOnecall:
    """Tests for One Call documents."""

    def test_hours(self, onecall_data):
        """Test hours are read with local offset, probability and daytime flag."""
        payload = parse_onecall(onecall_data)

        assert payload.source == "onecall"
        assert payload.precipitation is None
        first, second = payload.hourly

        assert first.start_time == datetime(2024, 3, 4, 11, tzinfo=timezone.utc)
        assert first.start_time.utcoffset() == timedelta(hours=-5)
        assert first.start_time.hour == 6
        assert first.temperature == 10.4
        assert first.precipitation_probability == 25
        assert first.is_daytime is True
        assert first.weather_class is None

        assert second.precipitation_probability is None
        assert second.is_daytime is False
        assert second.weather_class == "wi-night-clear"

    def test_missing_hourly(self):
        """Test a document without hourly data raises SourceError."""
        with pytest.raises(SourceError):
            parse_onecall({"timezone_offset": 0})

    def test_not_a_document(self):
        """Test a non-object response raises SourceError."""
        with pytest.raises(SourceError):
            parse_onecall([])
