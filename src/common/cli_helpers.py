"""Common CLI helper utilities."""

from __future__ import annotations

import argparse
import logging

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def setup_logging(level: str | int = logging.INFO) -> None:
    """Configure standard logging format for CLI tools.

    Logs go to stderr so stdout stays reserved for command output.
    """
    if isinstance(level, str):
        level = parse_log_level(level)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def parse_log_level(value: str) -> int:
    """Parse a log level name for argparse arguments.

    Args:
        value: Level name such as "info" or "DEBUG".

    Returns:
        Numeric logging level.

    Raises:
        argparse.ArgumentTypeError: If the name is not a known level.
    """
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"unknown log level: {value}")
    return level
