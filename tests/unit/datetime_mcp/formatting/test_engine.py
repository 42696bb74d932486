"""
Unit tests for the formatting engine.
"""

import re
from datetime import datetime, timedelta
from unittest.mock import patch

import pytest
import pytz

from datetime_mcp.core.settings import Config
from datetime_mcp.formatting.engine import (
    format_datetime,
    format_human,
    format_iso,
    format_request,
    timestamp,
)
from datetime_mcp.formatting.models import (
    EffectiveConfig,
    FormatSelector,
    FormattingError,
)


def effective(format: str, timezone: str = "UTC", template: str = "YYYY-MM-DD HH:mm:ss"):
    return EffectiveConfig(format=format, timezone=timezone, template=template)


class TestFormatDatetime:
    """Literal scenarios for 2024-01-15T10:30:00.000Z."""

    def test_iso(self, sample_instant):
        assert format_datetime(sample_instant, effective("iso")) == "2024-01-15T10:30:00.000Z"

    def test_unix(self, sample_instant):
        assert format_datetime(sample_instant, effective("unix")) == "1705314600"

    def test_unix_ms(self, sample_instant):
        assert format_datetime(sample_instant, effective("unix_ms")) == "1705314600000"

    def test_date(self, sample_instant):
        assert format_datetime(sample_instant, effective("date")) == "2024-01-15"

    def test_time(self, sample_instant):
        assert format_datetime(sample_instant, effective("time")) == "10:30:00"

    def test_human(self, sample_instant):
        assert (
            format_datetime(sample_instant, effective("human"))
            == "Mon, Jan 15, 2024, 10:30:00 AM"
        )

    def test_custom(self, sample_instant):
        config = effective("custom", template="YYYY/MM/DD HH:mm")

        assert format_datetime(sample_instant, config) == "2024/01/15 10:30"

    def test_unknown_format_falls_back_to_iso(self, sample_instant):
        assert format_datetime(sample_instant, effective("bogus-value")) == format_datetime(
            sample_instant, effective("iso")
        )

    def test_unknown_format_logs_warning(self, sample_instant):
        with patch("datetime_mcp.formatting.models.logger") as mock_logger:
            format_datetime(sample_instant, effective("bogus-value"))

        mock_logger.warning.assert_called_once()


class TestTimezones:
    def test_human_in_new_york(self, sample_instant):
        result = format_datetime(sample_instant, effective("human", "America/New_York"))

        assert result == "Mon, Jan 15, 2024, 05:30:00 AM"

    def test_date_in_tokyo(self, sample_instant):
        late = sample_instant + timedelta(hours=14)  # 00:30 JST next day

        assert format_datetime(late, effective("date", "Asia/Tokyo")) == "2024-01-16"

    def test_time_in_london_summer(self):
        instant = datetime(2024, 7, 15, 10, 30, 0, tzinfo=pytz.UTC)

        assert format_datetime(instant, effective("time", "Europe/London")) == "11:30:00"

    @pytest.mark.parametrize("format", ["iso", "unix", "unix_ms"])
    def test_zone_independent_formats(self, sample_instant, format):
        """Test that iso/unix/unix_ms ignore the timezone, even an invalid one."""
        in_utc = format_datetime(sample_instant, effective(format, "UTC"))

        assert format_datetime(sample_instant, effective(format, "Asia/Tokyo")) == in_utc
        assert format_datetime(sample_instant, effective(format, "Not/AZone")) == in_utc

    @pytest.mark.parametrize("format", ["human", "date", "time", "custom"])
    def test_invalid_timezone(self, sample_instant, format):
        with pytest.raises(FormattingError) as exc_info:
            format_datetime(sample_instant, effective(format, "Not/AZone"))

        assert "Not/AZone" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, pytz.UnknownTimeZoneError)

    @pytest.mark.parametrize("timezone", ["local", " ", "utc+1"])
    def test_names_outside_the_database_are_rejected(self, sample_instant, timezone):
        with pytest.raises(FormattingError):
            format_datetime(sample_instant, effective("time", timezone))


class TestShapes:
    """Output shapes hold for arbitrary instants."""

    INSTANTS = [
        datetime(2024, 1, 15, 10, 30, 0, tzinfo=pytz.UTC),
        datetime(2000, 2, 29, 0, 0, 0, 1000, tzinfo=pytz.UTC),
        datetime(2023, 12, 31, 23, 59, 59, 999000, tzinfo=pytz.UTC),
        datetime(1999, 7, 4, 12, 0, 0, tzinfo=pytz.UTC),
    ]

    PATTERNS = {
        "iso": r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z",
        "unix": r"\d+",
        "unix_ms": r"\d+",
        "date": r"\d{4}-\d{2}-\d{2}",
        "time": r"\d{2}:\d{2}:\d{2}",
        "human": r"[A-Z][a-z]{2}, [A-Z][a-z]{2} \d{1,2}, \d{4}, \d{2}:\d{2}:\d{2} (AM|PM)",
    }

    @pytest.mark.parametrize("instant", INSTANTS)
    @pytest.mark.parametrize("timezone", ["UTC", "America/New_York", "Asia/Kolkata"])
    def test_shapes(self, instant, timezone):
        for format, pattern in self.PATTERNS.items():
            result = format_datetime(instant, effective(format, timezone))
            assert re.fullmatch(pattern, result), (format, result)

    @pytest.mark.parametrize("instant", INSTANTS)
    def test_unix_consistency(self, instant):
        unix = int(format_datetime(instant, effective("unix")))
        unix_ms = int(format_datetime(instant, effective("unix_ms")))

        assert unix == unix_ms // 1000
        if instant.microsecond == 0:
            assert unix_ms == unix * 1000

    @pytest.mark.parametrize("instant", INSTANTS)
    def test_iso_round_trip(self, instant):
        rendered = format_iso(instant)
        parsed = datetime.fromisoformat(rendered.replace("Z", "+00:00"))

        assert parsed == instant


def test_human_noon_and_midnight():
    midnight = datetime(2024, 3, 1, 0, 5, 0, tzinfo=pytz.UTC)
    noon = datetime(2024, 3, 1, 12, 5, 0, tzinfo=pytz.UTC)

    assert format_human(midnight, "UTC") == "Fri, Mar 1, 2024, 12:05:00 AM"
    assert format_human(noon, "UTC") == "Fri, Mar 1, 2024, 12:05:00 PM"


def test_format_iso_naive_datetime():
    assert format_iso(datetime(2024, 1, 15, 10, 30, 0, 123456)) == "2024-01-15T10:30:00.123Z"


def test_format_selector_parse():
    assert FormatSelector.parse("unix_ms") is FormatSelector.UNIX_MS
    assert FormatSelector.parse("nope") is FormatSelector.ISO


class TestFormatRequest:
    def test_uses_config_defaults(self, sample_instant):
        config = Config.create_test_config(datetime_format="date", timezone="UTC")

        assert format_request(sample_instant, config) == "2024-01-15"

    def test_per_call_arguments(self, sample_instant):
        config = Config.create_test_config(datetime_format="date", timezone="UTC")

        result = format_request(
            sample_instant, config, format="time", timezone="America/New_York"
        )

        assert result == "05:30:00"

    def test_custom_template_from_config(self, sample_instant):
        config = Config.create_test_config(
            datetime_format="custom", date_format_string="DD/MM/YY", timezone="UTC"
        )

        assert format_request(sample_instant, config) == "15/01/24"

    def test_invalid_timezone(self, sample_instant, test_config):
        with pytest.raises(FormattingError):
            format_request(sample_instant, test_config, format="human", timezone="Not/AZone")

    def test_whitespace_timezone_is_not_replaced_by_default(self, sample_instant):
        config = Config.create_test_config(datetime_format="date", timezone="Asia/Tokyo")

        with pytest.raises(FormattingError):
            format_request(sample_instant, config, format="time", timezone=" ")

    def test_whitespace_format_falls_back_to_iso(self, sample_instant):
        config = Config.create_test_config(datetime_format="date", timezone="UTC")

        assert format_request(sample_instant, config, format=" ") == "2024-01-15T10:30:00.000Z"

    def test_local_is_not_a_timezone(self, sample_instant, test_config):
        with pytest.raises(FormattingError):
            format_request(sample_instant, test_config, format="time", timezone="local")


class TestTimestamp:
    def test_seconds(self, sample_instant):
        assert timestamp(sample_instant) == 1705314600
        assert timestamp(sample_instant, "seconds") == 1705314600

    def test_milliseconds(self, sample_instant):
        assert timestamp(sample_instant + timedelta(milliseconds=250), "milliseconds") == (
            1705314600250
        )

    def test_seconds_are_floored(self, sample_instant):
        assert timestamp(sample_instant + timedelta(milliseconds=999)) == 1705314600

    def test_unknown_unit(self, sample_instant):
        with pytest.raises(ValueError):
            timestamp(sample_instant, "minutes")
