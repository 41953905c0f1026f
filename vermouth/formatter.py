"""
Format template rendering.

A format string is rendered in three steps:

1. The composite placeholder {version+} is expanded once into
   FULL_VERSION_TEMPLATE.
2. Each base placeholder is replaced with its VersionInfo field, in
   PLACEHOLDERS order. Unset fields become empty strings.
3. Separators left around empty fields are collapsed until nothing changes,
   then trailing '-' and '+' are stripped.
"""

from .version_info import VersionInfo

DEFAULT_FORMAT = '{version+}'

COMPOSITE_PLACEHOLDER = '{version+}'
FULL_VERSION_TEMPLATE = '{version}-{prerelease}-{commits}-{timestamp}+{metadata}'

PLACEHOLDERS = (
    '{major}',
    '{minor}',
    '{patch}',
    '{version}',
    '{prerelease}',
    '{commits}',
    '{timestamp}',
    '{metadata}',
)

SEPARATOR_RULES = (
    ('--', '-'),
    ('++', '+'),
    ('-+', '+'),
    ('+-', '-'),
)


def expand_composite(fmt: str) -> str:
    """Replace {version+} with the full version template (not recursive)."""
    return fmt.replace(COMPOSITE_PLACEHOLDER, FULL_VERSION_TEMPLATE)


def base_version(info: VersionInfo) -> str:
    """
    Build MAJOR.MINOR.PATCH from a VersionInfo.

    Empty components are skipped so an opaque default version ("custom")
    renders on its own instead of as "custom..".
    """
    return '.'.join(part for part in (info.major, info.minor, info.patch) if part)


def substitute(fmt: str, info: VersionInfo) -> str:
    """Replace every base placeholder in `fmt` with its field value."""
    values = {
        '{major}': info.major,
        '{minor}': info.minor,
        '{patch}': info.patch,
        '{version}': base_version(info),
        '{prerelease}': info.prerelease,
        '{commits}': info.commits,
        '{timestamp}': info.timestamp,
        '{metadata}': info.metadata,
    }
    result = fmt
    for placeholder in PLACEHOLDERS:
        result = result.replace(placeholder, values[placeholder] or '')
    return result


def normalize_separators(text: str) -> str:
    """
    Remove separators left behind by empty fields.

    Examples:
        "1.0.0---5"          -> "1.0.0-5"
        "1.2.3-beta1-5-+"    -> "1.2.3-beta1-5"
        "1.2.3+"             -> "1.2.3"

    Applying it to its own output returns the same string.
    """
    result = text
    # Each pass shortens every separator run, so len(text) + 1 passes always suffice
    for _ in range(len(text) + 1):
        previous = result
        for old, new in SEPARATOR_RULES:
            result = result.replace(old, new)
        if result == previous:
            break
    return result.rstrip('-+')


def format_version(info: VersionInfo, fmt: str = DEFAULT_FORMAT) -> str:
    """
    Render a VersionInfo through a format template.

    Args:
        info: Parsed version components
        fmt: Template with placeholders such as "v{version+}" or "{major}.{minor}"

    Returns:
        str: Rendered version string without dangling separators
    """
    return normalize_separators(substitute(expand_composite(fmt), info))
