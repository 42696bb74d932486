"""
Timezone utilities for the formatting engine.

Every zone-dependent output goes through `zoned_parts`, so the rest of the
code never talks to the timezone database directly.
"""

from datetime import datetime, timedelta, tzinfo
from typing import NamedTuple

import pytz
from loguru import logger
from tzlocal import get_localzone_name


EPOCH = datetime(1970, 1, 1, tzinfo=pytz.UTC)


class ZonedParts(NamedTuple):
    """Calendar fields of an instant as seen in one timezone."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    weekday: int  # Monday is 0


def ensure_utc(instant: datetime) -> datetime:
    """Return the instant in UTC, assuming UTC if it is naive."""
    if instant.tzinfo is None:
        return pytz.UTC.localize(instant)
    return instant.astimezone(pytz.UTC)


def now_instant() -> datetime:
    """
    Capture the current instant in UTC at millisecond resolution.

    Returns:
        Timezone-aware UTC datetime with sub-millisecond digits dropped
    """
    now = datetime.now(pytz.UTC)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def epoch_milliseconds(instant: datetime) -> int:
    """Milliseconds since the epoch, rounded toward negative infinity."""
    return (ensure_utc(instant) - EPOCH) // timedelta(milliseconds=1)


def host_timezone_name() -> str:
    """
    Name of the host's timezone in the IANA database.

    Returns:
        Zone name such as "Europe/Paris", or "UTC" if the host zone cannot be
        determined or is not known to pytz
    """
    try:
        name = get_localzone_name()
    except (LookupError, ValueError) as e:
        logger.warning(f"Could not determine host timezone, using UTC: {e}")
        return "UTC"
    if not name or name not in pytz.all_timezones_set:
        logger.warning(f"Host timezone {name!r} is not a known zone, using UTC")
        return "UTC"
    return name


def get_timezone(name: str) -> tzinfo:
    """
    Look up a timezone by name.

    Args:
        name: IANA zone name or "UTC"

    Returns:
        tzinfo for the zone

    Raises:
        pytz.UnknownTimeZoneError: If the name is not in the timezone database
    """
    return pytz.timezone(name)


def zoned_parts(instant: datetime, timezone_name: str) -> ZonedParts:
    """
    Break an instant into calendar fields in the given timezone.

    Args:
        instant: Point in time (naive values are treated as UTC)
        timezone_name: Zone to render the instant in

    Returns:
        ZonedParts for the instant in that zone

    Raises:
        pytz.UnknownTimeZoneError: If the zone is unknown
    """
    local = ensure_utc(instant).astimezone(get_timezone(timezone_name))
    return ZonedParts(
        year=local.year,
        month=local.month,
        day=local.day,
        hour=local.hour,
        minute=local.minute,
        second=local.second,
        weekday=local.weekday(),
    )
