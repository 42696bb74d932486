"""
Datetime tools for FastMCP server.
"""

from typing import Annotated, Literal, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from loguru import logger
from pydantic import Field

from datetime_mcp.core.settings import Config, get_config
from datetime_mcp.core.timezone_utils import now_instant
from datetime_mcp.formatting import FormattingError, format_request, timestamp
from datetime_mcp.formatting.models import FormatSelector


FORMAT_CHOICES = ", ".join(selector.value for selector in FormatSelector)


def register_datetime_tools(server: FastMCP, config: Optional[Config] = None):
    """Register all datetime tools with the FastMCP server."""
    config = config or get_config()

    @server.tool(
        description="Get the current date and time in various formats",
    )
    def get_current_time(
        format: Annotated[
            Optional[str],
            Field(
                description=(
                    f"Output format for the datetime: {FORMAT_CHOICES} "
                    f'(optional, defaults to "{config.datetime_format}" from env)'
                )
            ),
        ] = None,
        timezone: Annotated[
            Optional[str],
            Field(
                description=(
                    "IANA timezone to use, e.g. UTC, America/New_York, Asia/Tokyo "
                    f'(optional, defaults to "{config.timezone}" from env)'
                )
            ),
        ] = None,
    ) -> str:
        """Get the current date and time.

        Unknown formats fall back to ISO 8601.

        Raises:
            ToolError: If the timezone is not recognized.
        """
        now = now_instant()
        try:
            return format_request(now, config, format=format, timezone=timezone)
        except FormattingError as e:
            logger.error(f"Error formatting date: {e}")
            raise ToolError(f"Error formatting date: {e}") from e

    @server.tool(
        description="Get the current Unix timestamp in seconds or milliseconds",
    )
    def get_timestamp(
        unit: Annotated[
            Literal["seconds", "milliseconds"], Field(description="Timestamp unit")
        ] = "seconds",
    ) -> int:
        """Get the current Unix timestamp."""
        return timestamp(now_instant(), unit)
