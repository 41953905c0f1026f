"""
Command-line interface for vermouth.

Main entry point: parses flags, loads configuration, resolves the version
and prints it to stdout.
"""

import sys
import argparse
from loguru import logger
from rich.console import Console

from . import __version__
from .config import load_config, DEFAULT_VERSION, DEFAULT_PATTERN
from .core import resolve_version, VersionResolutionError
from .formatter import DEFAULT_FORMAT
from .logging_config import setup_logging
from .timestamp import DEFAULT_TIMESTAMP_FORMAT

# Help and version text go to stdout, logs to stderr
console = Console(highlight=False)
err_console = Console(stderr=True)

PRIMARY = '#4CAF50'

BANNER = """
 █  █ █▀▀ █▀▀█ █▀▄▀█ █▀▀█ █  █ ▀▀█▀▀ █  █
 █  █ █▀▀ █▄▄▀ █ ▀ █ █  █ █  █   █   █▀▀█
  ▀▀  ▀▀▀ ▀ ▀▀ ▀   ▀ ▀▀▀▀  ▀▀▀   ▀   ▀  ▀"""

DIVIDER = '─' * 43

OPTIONS_HELP = [
    ('-h, --help', 'Show this help message'),
    ('-v, --version', 'Show vermouth version'),
    ('--timestamp=FORMAT', f'Timestamp format (default: {DEFAULT_TIMESTAMP_FORMAT})'),
    ('--metadata=VALUE', 'Sets the metadata part of the version'),
    ('--default=VERSION', f'Default version if none found (default: {DEFAULT_VERSION})'),
    ('--pattern=PATTERN', f'Git tag pattern to match (default: {DEFAULT_PATTERN})'),
    ('--format=FORMAT', f'Output format (default: {DEFAULT_FORMAT})'),
    ('--dir=PATH', 'Working tree to inspect (default: .)'),
    ('--log-level=LEVEL', 'Logging level written to stderr (default: WARNING)'),
]

PLACEHOLDERS_HELP = [
    ('{major}', 'Major version number'),
    ('{minor}', 'Minor version number'),
    ('{patch}', 'Patch version number'),
    ('{version}', '{major}.{minor}.{patch}'),
    ('{prerelease}', 'Pre-release identifier (e.g., beta1)'),
    ('{commits}', 'Commits since tag'),
    ('{timestamp}', 'Timestamp for uncommitted changes'),
    ('{metadata}', 'Build metadata'),
    ('{version+}', 'Full version: {version}-{prerelease}-{commits}-{timestamp}+{metadata}'),
]

EXAMPLES_HELP = [
    ('{version+}', '1.2.3-beta1-5-20251205143022+build'),
    ('v{version+}', 'v1.2.3-beta1-5-20251205143022+build'),
    ('v{version}', 'v1.2.3'),
    ('{major}.{minor}', '1.2'),
    ('{version}-SNAPSHOT', '1.2.3-SNAPSHOT'),
]


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser. Help is rendered by print_help, not argparse.

    Value options use nargs='?': a bare "--format" at the end of a command
    line leaves the option unset instead of aborting the run.
    """
    parser = argparse.ArgumentParser(
        prog='vermouth',
        description='Semantic version detection from git tags',
        add_help=False,
        allow_abbrev=False
    )

    parser.add_argument('-h', '--help', action='store_true', help='Show this help message')
    parser.add_argument('-v', '--version', action='store_true', help='Show vermouth version')

    # Version resolution
    parser.add_argument('--default', nargs='?', dest='default_version', help=f'Default version if none found (default: {DEFAULT_VERSION})')
    parser.add_argument('--pattern', nargs='?', help=f'Git tag pattern to match (default: {DEFAULT_PATTERN})')
    parser.add_argument('--dir', nargs='?', dest='directory', help='Working tree to inspect (default: .)')

    # Rendering
    parser.add_argument('--format', nargs='?', help=f'Output format (default: {DEFAULT_FORMAT})')
    parser.add_argument('--timestamp', nargs='?', dest='timestamp_format', help=f'Timestamp format (default: {DEFAULT_TIMESTAMP_FORMAT})')
    parser.add_argument('--metadata', nargs='?', help='Sets the metadata part of the version')

    # Logging
    parser.add_argument('--log-level', nargs='?', help='Logging level (default: WARNING)')

    return parser


def parse_arguments(argv=None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Unknown arguments are ignored with a warning so that a stray flag in a
    build script never stops a version from being printed.
    """
    args, unknown = build_parser().parse_known_args(argv)
    for arg in unknown:
        logger.warning(f"Ignoring unknown argument: {arg}")
    return args


def _print_rows(rows, width: int) -> None:
    for left, right in rows:
        console.print(f"  {left:<{width}} {right}", markup=False)


def print_help() -> None:
    """Print the banner, usage, options, placeholders and format examples."""
    console.print()
    console.print(DIVIDER, style='grey53')
    console.print(BANNER, style=PRIMARY, markup=False)
    console.print(f" v{__version__}", style='bold white')
    console.print()
    console.print(DIVIDER, style='grey53')
    console.print()
    console.print('Semantic version detection from git tags')
    console.print()
    console.print(f"[{PRIMARY}]Usage:[/] vermouth \\[options]")
    console.print()
    console.print(f"[{PRIMARY}]Options:[/]")
    _print_rows(OPTIONS_HELP, 22)
    console.print()
    console.print(f"[{PRIMARY}]Format placeholders:[/]")
    _print_rows(PLACEHOLDERS_HELP, 13)
    console.print()
    console.print(f"[{PRIMARY}]Format examples:[/]")
    _print_rows(EXAMPLES_HELP, 22)
    console.print()
    console.print(f"[{PRIMARY}]Environment:[/]")
    console.print('  Every option can also be set with VERMOUTH_<NAME> (e.g., VERMOUTH_FORMAT),', markup=False)
    console.print('  read from the environment or a .env file. Flags take precedence.', markup=False)
    console.print()


def main(argv=None) -> None:
    """Main entry point for the application."""
    setup_logging(console=err_console)

    args = parse_arguments(argv)

    if args.help:
        print_help()
        return

    if args.version:
        console.print(__version__, markup=False)
        return

    config = load_config(args)
    if config is None:
        sys.exit(1)

    setup_logging(config.log_level, console=err_console)

    try:
        version = resolve_version(config)
    except (VersionResolutionError, OSError) as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    # Plain print keeps the line free of Rich wrapping and styling
    print(version)


if __name__ == '__main__':
    main()
