"""
Formatting engine: render an instant according to an EffectiveConfig.

Examples (instant 2024-01-15T10:30:00.000Z):
    iso                      -> "2024-01-15T10:30:00.000Z"
    unix                     -> "1705314600"
    unix_ms                  -> "1705314600000"
    human, America/New_York  -> "Mon, Jan 15, 2024, 05:30:00 AM"
    date, Asia/Tokyo         -> "2024-01-15"
    time, Europe/London      -> "10:30:00"
"""

from datetime import datetime
from typing import Optional, Union

import pytz
from loguru import logger

from datetime_mcp.core.settings import Config
from datetime_mcp.core.timezone_utils import (
    ensure_utc,
    epoch_milliseconds,
    zoned_parts,
)
from .custom import format_custom
from .models import EffectiveConfig, FormatSelector, FormattingError, TimestampUnit
from .resolver import resolve_config


WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def format_iso(instant: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix."""
    utc = ensure_utc(instant)
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"


def format_human(instant: datetime, timezone_name: str) -> str:
    """US English long form, e.g. "Mon, Jan 15, 2024, 05:30:00 AM"."""
    p = zoned_parts(instant, timezone_name)
    hour12 = p.hour % 12 or 12
    meridiem = "AM" if p.hour < 12 else "PM"
    return (
        f"{WEEKDAY_NAMES[p.weekday]}, {MONTH_NAMES[p.month - 1]} {p.day}, "
        f"{p.year:04d}, {hour12:02d}:{p.minute:02d}:{p.second:02d} {meridiem}"
    )


def format_date(instant: datetime, timezone_name: str) -> str:
    p = zoned_parts(instant, timezone_name)
    return f"{p.year:04d}-{p.month:02d}-{p.day:02d}"


def format_time(instant: datetime, timezone_name: str) -> str:
    p = zoned_parts(instant, timezone_name)
    return f"{p.hour:02d}:{p.minute:02d}:{p.second:02d}"


def format_datetime(instant: datetime, config: EffectiveConfig) -> str:
    """
    Render an instant using the resolved format and timezone.

    iso, unix and unix_ms never look at the timezone. Unknown formats
    render as iso.

    Args:
        instant: Point in time to render
        config: Resolved formatting settings

    Returns:
        Formatted datetime string

    Raises:
        FormattingError: If the timezone is not a known zone
    """
    selector = FormatSelector.parse(config.format)

    try:
        if selector is FormatSelector.UNIX:
            return str(epoch_milliseconds(instant) // 1000)
        if selector is FormatSelector.UNIX_MS:
            return str(epoch_milliseconds(instant))
        if selector is FormatSelector.HUMAN:
            return format_human(instant, config.timezone)
        if selector is FormatSelector.DATE:
            return format_date(instant, config.timezone)
        if selector is FormatSelector.TIME:
            return format_time(instant, config.timezone)
        if selector is FormatSelector.CUSTOM:
            return format_custom(instant, config.template, config.timezone)
        return format_iso(instant)
    except pytz.UnknownTimeZoneError as e:
        raise FormattingError(f"Unknown time zone: {e}") from e


def format_request(
    instant: datetime,
    config: Config,
    format: Optional[str] = None,
    timezone: Optional[str] = None,
) -> str:
    """
    Resolve per-call arguments against the config and render the instant.

    Raises:
        FormattingError: If the timezone is not a known zone
    """
    effective = resolve_config(config, format=format, timezone=timezone)
    result = format_datetime(instant, effective)
    logger.debug(
        f"Formatted {format_iso(instant)} as {effective.format} "
        f"in {effective.timezone}: {result}"
    )
    return result


def timestamp(
    instant: datetime, unit: Union[TimestampUnit, str] = TimestampUnit.SECONDS
) -> int:
    """
    Raw epoch timestamp for an instant.

    Args:
        instant: Point in time
        unit: "seconds" or "milliseconds"

    Returns:
        Whole seconds (floored) or milliseconds since the epoch

    Raises:
        ValueError: If the unit is not supported
    """
    unit = TimestampUnit(unit)
    millis = epoch_milliseconds(instant)
    if unit is TimestampUnit.MILLISECONDS:
        return millis
    return millis // 1000
