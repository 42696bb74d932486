"""
Main entry point for the DateTime MCP server.

Examples:
    DATETIME_FORMAT=iso python -m datetime_mcp.main
    DATETIME_FORMAT=human TIMEZONE=America/New_York python -m datetime_mcp.main
    DATETIME_FORMAT=custom DATE_FORMAT_STRING="YYYY-MM-DD HH:mm:ss" python -m datetime_mcp.main
"""

import sys
from typing import Optional
from urllib.parse import urlparse

from fastmcp import FastMCP
from loguru import logger

from datetime_mcp import __version__
from datetime_mcp.core.logger import init_logging
from datetime_mcp.core.settings import Config, get_config
from datetime_mcp.formatting.models import FormatSelector
from datetime_mcp.tools import register_datetime_tools


SERVER_NAME = "datetime-mcp-server"


def create_app(config: Optional[Config] = None) -> FastMCP:
    """Create the FastMCP application with the datetime tools registered."""
    server = FastMCP(name=SERVER_NAME, version=__version__)
    register_datetime_tools(server, config or get_config())
    return server


def log_startup(config: Config):
    """Log the defaults the server will use."""
    logger.info(f"DateTime MCP Server running on {config.mcp_transport}")
    logger.info(f"Default format: {config.datetime_format}")
    logger.info(f"Default timezone: {config.timezone}")
    if config.datetime_format == FormatSelector.CUSTOM.value:
        logger.info(f"Custom format string: {config.date_format_string}")


def run_server(config: Config):
    """Build the server and serve on the configured transport."""
    server = create_app(config)
    transport = config.mcp_transport.lower()

    if transport == "stdio":
        log_startup(config)
        server.run()
    elif transport == "http":
        if not config.mcp_server_url:
            raise ValueError("MCP_SERVER_URL is not configured in settings")

        parsed_url = urlparse(config.mcp_server_url)
        host = parsed_url.hostname or "0.0.0.0"
        port = parsed_url.port or 8001
        path = parsed_url.path or "/mcp"

        log_startup(config)
        server.run(transport="http", host=host, port=port, path=path)
    else:
        raise ValueError(f"Unsupported MCP transport: {config.mcp_transport}")


def main():
    config = get_config()
    init_logging(config.log_file)
    try:
        run_server(config)
    except Exception:
        logger.exception("Fatal error running server")
        sys.exit(1)


if __name__ == "__main__":
    main()
