"""
Models shared by the configuration resolver and the formatting engine.
"""

from enum import Enum

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field


class FormatSelector(str, Enum):
    """Supported output formats."""

    ISO = "iso"
    UNIX = "unix"
    UNIX_MS = "unix_ms"
    HUMAN = "human"
    DATE = "date"
    TIME = "time"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: str) -> "FormatSelector":
        """Map a format name to a selector, falling back to ISO for unknown names."""
        try:
            return cls(value)
        except ValueError:
            logger.warning(f"Unknown format '{value}', falling back to iso")
            return cls.ISO


class TimestampUnit(str, Enum):
    """Units for raw epoch timestamps."""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


class EffectiveConfig(BaseModel):
    """Resolved formatting settings for one request."""

    format: str = Field(..., description="Requested output format")
    timezone: str = Field(..., description="Timezone to render in")
    template: str = Field(..., description="Template for the custom format")

    model_config = ConfigDict(frozen=True)


class FormattingError(Exception):
    """Raised when a datetime cannot be rendered, e.g. for an unknown timezone."""
