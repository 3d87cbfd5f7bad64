"""Logging configuration for termprogress."""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    format_str: Optional[str] = None,
) -> None:
    """Configure the ``termprogress`` logger.

    Log records always go to stderr (and optionally a file), never to
    stdout where indicators draw.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to write logs to
        format_str: Optional custom format string
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    formatter = logging.Formatter(format_str or DEFAULT_FORMAT)
    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    package_logger = logging.getLogger("termprogress")
    package_logger.setLevel(numeric_level)

    for handler in package_logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)
            handler.close()

    for handler in handlers:
        package_logger.addHandler(handler)
