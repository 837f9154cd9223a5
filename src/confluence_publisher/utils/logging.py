"""Logging setup for the publisher server."""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "confluence-publisher"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(
    level: int = logging.WARNING, stream: TextIO = sys.stderr
) -> logging.Logger:
    """Configure the root logger and return the application logger.

    Logging goes to stderr by default because stdout carries the MCP
    stdio protocol.

    Args:
        level: Logging level to apply
        stream: Stream the handler writes to

    Returns:
        The "confluence-publisher" logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger
