"""
Version record and tag description parsing.

Turns `git describe` output into a VersionInfo. Parsing never fails: an
unrecognised description falls back to the default version, and an
unrecognised default version is carried through as an opaque string.
"""

import re
from dataclasses import dataclass, replace
from loguru import logger

# v<major>.<minor>.<patch>[-<prerelease>][-<commits>-g<hash>]
# Supports: v0.1.0, v0.1.0-beta1, v0.1.0-5-g1a2b3c4, v0.1.0-beta1-5-g1a2b3c4
DESCRIBE_PATTERN = re.compile(
    r'v(\d+)\.(\d+)\.(\d+)'
    r'(?:-(?P<prerelease>[a-zA-Z][a-zA-Z0-9.]*))?'
    r'(?:-(?P<commits>\d+)-g(?P<hash>[0-9a-f]+))?',
    re.ASCII
)

DEFAULT_VERSION_PATTERN = re.compile(r'(\d+)\.(\d+)\.(\d+)', re.ASCII)


@dataclass(frozen=True)
class VersionInfo:
    """Parsed version components. All fields are plain text."""

    major: str
    minor: str = ''
    patch: str = ''
    prerelease: str = ''
    commits: str = ''
    timestamp: str = ''
    metadata: str = ''

    def with_timestamp(self, timestamp: str) -> 'VersionInfo':
        """Return a copy with the timestamp field filled in."""
        return replace(self, timestamp=timestamp)


def parse_describe(description: str, default_version: str, metadata: str = '') -> VersionInfo:
    """
    Parse a tag description into a VersionInfo.

    Args:
        description: `git describe` output (or the "v<default>" fallback)
        default_version: Version used when the description does not match
        metadata: Caller supplied build metadata, copied verbatim

    Returns:
        VersionInfo: Parsed version. Commit hash is matched but not kept.
    """
    match = DESCRIBE_PATTERN.fullmatch(description)
    if match:
        major, minor, patch = match.groups()[:3]
        return VersionInfo(
            major=major,
            minor=minor,
            patch=patch,
            prerelease=match.group('prerelease') or '',
            commits=match.group('commits') or '',
            metadata=metadata
        )

    logger.debug(f"Unrecognised tag description '{description}', using default version {default_version}")

    match = DEFAULT_VERSION_PATTERN.fullmatch(default_version)
    if match:
        major, minor, patch = match.groups()
        return VersionInfo(major=major, minor=minor, patch=patch, metadata=metadata)

    # Non-standard default, just use it as-is
    logger.debug(f"Default version '{default_version}' is not MAJOR.MINOR.PATCH, using it verbatim")
    return VersionInfo(major=default_version, metadata=metadata)
