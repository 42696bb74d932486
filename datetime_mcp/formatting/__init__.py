"""
Formatting engine for the datetime tools.
"""

from .custom import format_custom
from .engine import format_datetime, format_request, timestamp
from .models import EffectiveConfig, FormatSelector, FormattingError, TimestampUnit
from .resolver import resolve_config

__all__ = [
    "EffectiveConfig",
    "FormatSelector",
    "FormattingError",
    "TimestampUnit",
    "format_custom",
    "format_datetime",
    "format_request",
    "resolve_config",
    "timestamp",
]
