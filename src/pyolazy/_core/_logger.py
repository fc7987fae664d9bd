"""Logger configuration for pyolazy.

The library logger stays silent (`NullHandler`) until `setup_logger` is called by the host application.
"""

import logging
import os
import sys

__all__ = ["logger", "setup_logger"]

LOGGER_NAME = "pyolazy"


def setup_logger(
    name: str = LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure and return a logger instance.

    Args:
        name (str): Logger name. Defaults to the library logger.
        level (str | None): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Read from `PYOLAZY_LOG_LEVEL` if omitted.
        format_string (str | None): Custom format string.

    Returns:
        logging.Logger: The configured logger instance.
    """
    level = level or os.getenv("PYOLAZY_LOG_LEVEL", "INFO")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    configured = logging.getLogger(name)

    # Only configure if not already configured
    if not any(isinstance(h, logging.StreamHandler) for h in configured.handlers):
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        configured.addHandler(handler)
        configured.setLevel(getattr(logging, level.upper()))
        configured.propagate = False

    return configured


logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())
