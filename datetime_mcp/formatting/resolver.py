"""
Resolve the effective formatting settings for a single request.
"""

from typing import Optional

from datetime_mcp.core.settings import (
    Config,
    DEFAULT_DATE_FORMAT_STRING,
    DEFAULT_DATETIME_FORMAT,
)
from datetime_mcp.core.timezone_utils import host_timezone_name
from .models import EffectiveConfig


def _first_set(*values: Optional[str]) -> str:
    """Return the first value that is not None or empty."""
    for value in values:
        if value:
            return value
    return ""


def resolve_config(
    config: Config,
    format: Optional[str] = None,
    timezone: Optional[str] = None,
) -> EffectiveConfig:
    """
    Merge per-call arguments, server config and built-in defaults.

    Per field the first non-empty value wins: the per-call argument, then the
    config value, then the built-in default. The custom template only comes
    from config. Nothing is validated here; bad values surface when formatting.

    Args:
        config: Server config
        format: Per-call format, if any
        timezone: Per-call timezone, if any

    Returns:
        EffectiveConfig for the request
    """
    return EffectiveConfig(
        format=_first_set(format, config.datetime_format, DEFAULT_DATETIME_FORMAT),
        timezone=_first_set(timezone, config.timezone, host_timezone_name()),
        template=_first_set(config.date_format_string, DEFAULT_DATE_FORMAT_STRING),
    )
