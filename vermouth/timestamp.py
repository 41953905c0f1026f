"""
Timestamps for builds from a dirty working tree.

Patterns use a small token vocabulary (YYYY, YY, MM, dd, HH, mm, ss) that is
translated to strftime directives before formatting the local time.
"""

import re
from datetime import datetime
from typing import Optional

DEFAULT_TIMESTAMP_FORMAT = 'YYYYMMddHHmmss'

# Order matters: YYYY must be tried before YY
TIME_TOKENS = (
    ('YYYY', '%Y'),
    ('YY', '%y'),
    ('MM', '%m'),
    ('dd', '%d'),
    ('HH', '%H'),
    ('mm', '%M'),
    ('ss', '%S'),
    ('%', '%%'),
)

_TOKEN_MAP = dict(TIME_TOKENS)
_TOKEN_PATTERN = re.compile('|'.join(re.escape(token) for token, _ in TIME_TOKENS))


def convert_time_format(pattern: str) -> str:
    """
    Convert a human-readable time pattern to a strftime format.

    The pattern is scanned once, left to right; at each position the tokens
    are tried in TIME_TOKENS order. Replacement text is never rescanned.

    Args:
        pattern: Pattern such as "YYYYMMddHHmmss" or "YYYY-MM-dd"

    Returns:
        str: Equivalent strftime format (e.g., "%Y%m%d%H%M%S")
    """
    return _TOKEN_PATTERN.sub(lambda match: _TOKEN_MAP[match.group(0)], pattern)


def render_timestamp(pattern: str, now: Optional[datetime] = None) -> str:
    """Format `now` (default: current local time) through a time pattern."""
    if now is None:
        now = datetime.now()
    return now.strftime(convert_time_format(pattern))
