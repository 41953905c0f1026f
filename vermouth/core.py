"""
Version resolution pipeline.

describe -> parse -> dirty check -> timestamp -> format. Every step before
formatting has a fallback. An empty render is a valid result, not an error.
"""

from datetime import datetime
from typing import Optional
from loguru import logger

from .config import Config
from .formatter import format_version
from .git import describe, is_dirty
from .timestamp import render_timestamp
from .version_info import parse_describe


class VersionResolutionError(Exception):
    """Raised when a version cannot be produced at all.

    Nothing in the pipeline raises it today: every git or parse failure has a
    fallback. The CLI still maps it to exit code 1.
    """


def resolve_version(config: Config, now: Optional[datetime] = None) -> str:
    """
    Resolve and render the version for the configured working tree.

    Args:
        config: Resolution and rendering settings
        now: Clock override for the dirty-tree timestamp (default: current local time)

    Returns:
        str: Rendered version string
    """
    description = describe(config.directory, config.pattern, config.default_version)
    info = parse_describe(description, config.default_version, config.metadata)
    logger.info(f"Resolved {description} -> {info}")

    if is_dirty(config.directory):
        info = info.with_timestamp(render_timestamp(config.timestamp_format, now))
        logger.info(f"Uncommitted changes, timestamp {info.timestamp}")

    return format_version(info, config.format)
