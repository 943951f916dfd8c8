"""Centralized logging configuration for the list-bench project."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    stream=None,
) -> logging.Logger:
    """
    Set up centralized logging configuration for the project.

    Log records go to stderr by default so that stdout only carries the
    benchmark report.

    Args:
        level: Logging level (default: INFO)
        format_string: Custom format string (optional)
        stream: Stream for the handler (default: sys.stderr)

    Returns:
        Configured logger instance
    """
    if format_string is None:
        format_string = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

    logger = logging.getLogger("list_bench")

    # Avoid duplicate configuration
    if logger.hasHandlers():
        logger.setLevel(level)
        return logger

    formatter = logging.Formatter(format_string)
    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    logger.setLevel(level)
    logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (usually __name__)

    Returns:
        Logger instance
    """
    if not logging.getLogger("list_bench").hasHandlers():
        setup_logging()

    if name == "list_bench" or name.startswith("list_bench."):
        return logging.getLogger(name)
    return logging.getLogger(f"list_bench.{name}")


def get_test_logger(name: str) -> logging.Logger:
    """
    Get a logger for tests with appropriate configuration.

    Args:
        name: Test module name

    Returns:
        Logger instance for tests
    """
    logger = logging.getLogger(f"Tests.{name}")

    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s [%(levelname)s] %(message)s')
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        logger.propagate = False

    return logger
