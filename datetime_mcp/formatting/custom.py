"""
Custom template formatting.

Supported tokens: YYYY (4-digit year), YY (2-digit year), MM (month),
DD (day), HH (24-hour), mm (minutes), ss (seconds). Anything else in the
template is copied through as-is.

Examples:
    format_custom(dt, "YYYY-MM-DD", "UTC") -> "2024-01-15"
    format_custom(dt, "DD/MM/YYYY HH:mm", "UTC") -> "15/01/2024 10:30"
"""

from datetime import datetime
from typing import Callable, List, Tuple

from datetime_mcp.core.timezone_utils import ZonedParts, zoned_parts


# Applied in order; YYYY has to run before YY
TOKEN_RULES: List[Tuple[str, Callable[[ZonedParts], str]]] = [
    ("YYYY", lambda p: f"{p.year:04d}"),
    ("YY", lambda p: f"{p.year:04d}"[-2:]),
    ("MM", lambda p: f"{p.month:02d}"),
    ("DD", lambda p: f"{p.day:02d}"),
    ("HH", lambda p: f"{p.hour:02d}"),
    ("mm", lambda p: f"{p.minute:02d}"),
    ("ss", lambda p: f"{p.second:02d}"),
]


def apply_template(parts: ZonedParts, template: str) -> str:
    """Replace every token occurrence in the template with the matching field."""
    result = template
    for token, render in TOKEN_RULES:
        result = result.replace(token, render(parts))
    return result


def format_custom(instant: datetime, template: str, timezone_name: str) -> str:
    """
    Render an instant with a custom template in the given timezone.

    Raises:
        pytz.UnknownTimeZoneError: If the zone is unknown
    """
    return apply_template(zoned_parts(instant, timezone_name), template)
