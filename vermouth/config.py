"""
Configuration management for vermouth.

Handles environment variable loading, validation, and provides a centralized
configuration object for a single version resolution.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv
from loguru import logger

from .formatter import DEFAULT_FORMAT
from .timestamp import DEFAULT_TIMESTAMP_FORMAT

# Load environment variables from .env file
load_dotenv()

DEFAULT_VERSION = '0.0.1'
DEFAULT_PATTERN = 'v*.*.*'
DEFAULT_LOG_LEVEL = 'WARNING'
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def get_config_value(cli_args, field_name: str, env_key: str, default: str = '') -> str:
    """
    Get configuration value with proper precedence: CLI args > env vars > defaults.

    An empty environment variable counts as unset. An empty CLI value
    (e.g., --metadata=) is kept.

    Args:
        cli_args: CLI arguments object or None
        field_name: Name of the CLI argument field
        env_key: Environment variable key
        default: Default value if neither CLI nor env var is set

    Returns:
        str: The configuration value
    """
    cli_value = getattr(cli_args, field_name, None) if cli_args else None
    if cli_value is not None:
        return cli_value

    return os.environ.get(env_key, '') or default


@dataclass
class Config:
    """Configuration object containing all settings for one invocation."""

    # Version resolution
    directory: str
    pattern: str
    default_version: str

    # Rendering
    format: str
    timestamp_format: str
    metadata: str

    # Logging
    log_level: str


def _validate_paths(directory: str, validation_errors: list) -> None:
    """
    Validate the working tree directory.

    Args:
        directory: Directory git commands run in
        validation_errors: List to append validation errors
    """
    if not os.path.exists(directory):
        validation_errors.append(f'Directory does not exist: {directory}')
    elif not os.path.isdir(directory):
        validation_errors.append(f'Not a directory: {directory}')


def load_config(cli_args=None) -> Config:
    """
    Load and validate configuration from CLI arguments and environment variables.

    CLI arguments take precedence over environment variables.

    Args:
        cli_args: Parsed CLI arguments or None

    Returns:
        Config: Validated configuration object, or None if validation failed
    """
    directory = get_config_value(cli_args, 'directory', 'VERMOUTH_DIR', '.')
    pattern = get_config_value(cli_args, 'pattern', 'VERMOUTH_PATTERN', DEFAULT_PATTERN)
    default_version = get_config_value(cli_args, 'default_version', 'VERMOUTH_DEFAULT', DEFAULT_VERSION)
    fmt = get_config_value(cli_args, 'format', 'VERMOUTH_FORMAT', DEFAULT_FORMAT)
    timestamp_format = get_config_value(cli_args, 'timestamp_format', 'VERMOUTH_TIMESTAMP', DEFAULT_TIMESTAMP_FORMAT)
    metadata = get_config_value(cli_args, 'metadata', 'VERMOUTH_METADATA', '')

    # Handle log_level (case insensitive)
    log_level = get_config_value(cli_args, 'log_level', 'VERMOUTH_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()

    validation_errors = []

    if log_level not in VALID_LOG_LEVELS:
        validation_errors.append(f'LOG_LEVEL must be one of {VALID_LOG_LEVELS} (got: {log_level})')

    # Update logging level early so debug statements work
    if log_level in VALID_LOG_LEVELS:
        from .logging_config import setup_logging
        setup_logging(log_level)

    _validate_paths(directory, validation_errors)

    if validation_errors:
        logger.error('Configuration Error:')
        for i, error_msg in enumerate(validation_errors, 1):
            logger.error(f'   {i}. {error_msg}')
        return None  # Return None to indicate validation failure

    config = Config(
        directory=directory,
        pattern=pattern,
        default_version=default_version,
        format=fmt,
        timestamp_format=timestamp_format,
        metadata=metadata,
        log_level=log_level
    )

    logger.debug(f'DIR = {config.directory}')
    logger.debug(f'PATTERN = {config.pattern}')
    logger.debug(f'DEFAULT = {config.default_version}')
    logger.debug(f'FORMAT = {config.format}')
    logger.debug(f'TIMESTAMP = {config.timestamp_format}')
    logger.debug(f'METADATA = {config.metadata}')

    return config
