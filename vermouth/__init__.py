"""
Vermouth

Semantic version detection from git tags. Resolves the nearest matching tag,
notes uncommitted changes, and renders the result through a format template.
"""

from ._version import __version__

__author__ = "vermouth contributors"
__description__ = "Semantic version detection from git tags"
