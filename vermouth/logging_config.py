"""
Logging configuration for vermouth.

Centralized logging setup to avoid circular imports. Log output always goes
to stderr; stdout carries nothing but the rendered version.
"""

import sys
from loguru import logger
from rich.console import Console

LOG_FORMAT = '<green>{time:YYYY/MM/DD HH:mm:ss}</green> | <level>{level: <8}</level> - <level>{message}</level>'


def setup_logging(log_level: str = 'WARNING', console: Console = None) -> None:
    """
    Set up logging configuration.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console: Rich Console bound to stderr (optional)
    """
    logger.remove()

    if console:
        logger.add(
            lambda msg: console.print(msg, end='', markup=False, highlight=False, soft_wrap=True),
            level=log_level,
            format=LOG_FORMAT
        )
    else:
        # Fallback to stderr for simple logging
        logger.add(
            sys.stderr,
            level=log_level,
            format=LOG_FORMAT,
            colorize=True
        )
