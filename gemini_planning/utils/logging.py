"""
Logging utilities for the MCP server.

Logs go to stderr: stdout carries the stdio transport.
"""

import logging
import os
import sys
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


def setup_logging(
    name: Optional[str] = None,
    debug: Optional[bool] = None,
    enabled: Optional[bool] = None,
) -> logging.Logger:
    """
    Setup logging for the server

    Args:
        name: Logger name (default: this module's logger)
        debug: Force DEBUG level (default: ``DEBUG`` env var)
        enabled: Enable output (default: ``ENABLE_LOGGING`` env var)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name or __name__)

    if enabled is None:
        enabled = _env_flag("ENABLE_LOGGING", "true")
    if debug is None:
        debug = _env_flag("DEBUG", "false")

    if not enabled:
        logger.setLevel(logging.CRITICAL)
        return logger

    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt='[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger


# Package logger; child loggers (gemini_planning.*) propagate to it
logger = setup_logging("gemini_planning")
