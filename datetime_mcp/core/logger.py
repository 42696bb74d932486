import logging
import sys
from loguru import logger


class InterceptHandler(logging.Handler):
    """
    Default handler from examples in loguru documentaion.
    See https://loguru.readthedocs.io/en/stable/overview.html#entirely-compatible-with-standard-logging
    """

    def emit(self, record: logging.LogRecord):
        # Get corresponding Loguru level if it exists
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message
        frame = logging.currentframe()
        depth = 2
        if frame is not None:
            while frame.f_code.co_filename == logging.__file__:
                if frame.f_back is None:
                    break
                frame = frame.f_back
                depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def format_record(record: dict) -> str:
    """
    Custom format for loguru loggers.
    Only the level label and the message are colorized.
    """
    # Example: 2025-01-01 12:34:56.789 | INFO     | datetime_mcp.main:log_startup:40 - message
    format_string: str = (
        "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
        "<level>{level: <8}</level> | "
        "{name}:{function}:{line} - "
        "<level>{message}</level>\n{exception}"
    )
    return format_string


def get_log_level() -> str:
    """Get the log level from settings, falling back to INFO if they cannot be loaded."""
    try:
        from datetime_mcp.core.settings import get_config

        return get_config().log_level.upper()
    except ImportError:
        return "INFO"


def init_logging(log_file: str = ""):
    """
    Route stdlib logging (fastmcp, mcp, uvicorn) through loguru and send
    everything to stderr.

    stdout is reserved for the stdio transport, so no sink may write there.
    """
    intercept_handler = InterceptHandler()
    logging.basicConfig(handlers=[intercept_handler], level=0, force=True)

    # Let records from library loggers propagate to the intercepting root handler
    for name in list(logging.root.manager.loggerDict):
        if name.startswith(("fastmcp", "mcp", "uvicorn")):
            logging.getLogger(name).handlers = []
            logging.getLogger(name).propagate = True

    log_level = get_log_level()

    # customize level colors
    logger.level("DEBUG", color="<blue>")
    logger.level("INFO", color="")
    logger.level("WARNING", color="<yellow>")
    logger.level("ERROR", color="<red>")
    logger.level("CRITICAL", color="<red>")

    logger.configure(
        handlers=[
            {
                "sink": sys.stderr,
                "level": log_level,
                "format": format_record,
                "colorize": sys.stderr.isatty(),
            }
        ]
    )
    if log_file:
        logger.add(log_file, level=log_level)
