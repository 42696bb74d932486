"""
Server config using Pydantic Settings.

This module handles all environment variable configuration using pydantic-settings.
The config is built once at startup and is frozen afterwards.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from datetime_mcp.core.timezone_utils import host_timezone_name


DEFAULT_DATETIME_FORMAT = "iso"
DEFAULT_DATE_FORMAT_STRING = "YYYY-MM-DD HH:mm:ss"


class Config(BaseSettings):
    """Server config."""

    # Formatting defaults
    datetime_format: str = Field(
        default=DEFAULT_DATETIME_FORMAT,
        description="Default output format (iso, unix, unix_ms, human, date, time, custom)",
    )
    date_format_string: str = Field(
        default=DEFAULT_DATE_FORMAT_STRING,
        description="Template used when the format is 'custom' (tokens: YYYY, YY, MM, DD, HH, mm, ss)",
    )
    timezone: str = Field(
        default_factory=host_timezone_name,
        description="Default timezone (e.g., 'UTC', 'America/New_York'); defaults to the host timezone",
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_file: str = Field(
        default="", description="Optional file to write logs to in addition to stderr"
    )

    # MCP Configuration
    mcp_transport: str = Field(
        default="stdio", description="MCP transport to serve on ('stdio' or 'http')"
    )
    mcp_server_url: str = Field(
        default="http://localhost:8001/mcp",
        description="URL the MCP server listens on when using the http transport",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @classmethod
    def create_test_config(cls, **kwargs) -> "Config":
        """Create a config instance for testing without loading from .env file or environment variables."""
        from pydantic_settings import PydanticBaseSettingsSource

        class TestConfig(cls):  # type: ignore
            @classmethod
            def settings_customise_sources(
                cls,
                settings_cls: type[BaseSettings],
                init_settings: PydanticBaseSettingsSource,
                env_settings: PydanticBaseSettingsSource,
                dotenv_settings: PydanticBaseSettingsSource,
                file_secret_settings: PydanticBaseSettingsSource,
            ) -> tuple[PydanticBaseSettingsSource, ...]:
                # Only defaults and passed kwargs
                return (init_settings,)

        return TestConfig(**kwargs)


# Global config instance
_config = None


def get_config() -> Config:
    """Get the global config instance, creating it if it doesn't exist."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config():
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
