"""
Git queries for version detection.

Wraps the two git commands vermouth depends on: the nearest-tag description
and the working tree status. Neither function raises; any failure is folded
into a fallback value so the tool always prints a version.
"""

import subprocess
from loguru import logger

# Seconds to wait for a single git command
GIT_TIMEOUT = 10


def _run_git(args: list, directory: str) -> subprocess.CompletedProcess:
    """Run a git command in the given directory and capture its text output."""
    return subprocess.run(
        ['git'] + args,
        capture_output=True,
        text=True,
        encoding='utf-8',
        errors='replace',
        timeout=GIT_TIMEOUT,
        cwd=directory
    )


def describe(directory: str, pattern: str, default_version: str) -> str:
    """
    Describe the current commit relative to the nearest matching tag.

    Args:
        directory: Working tree to query
        pattern: Glob pattern restricting which tags are considered (e.g., "v*.*.*")
        default_version: Version used when no tag can be resolved

    Returns:
        str: Trimmed `git describe` output such as "v1.2.3-beta1-5-gabcdef1",
             or "v<default_version>" if git failed
    """
    fallback = f"v{default_version}"
    try:
        result = _run_git(['describe', '--tags', '--match', pattern], directory)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"git describe unavailable ({e}), using fallback {fallback}")
        return fallback

    if result.returncode != 0:
        logger.debug(f"git describe failed: {result.stderr.strip() or result.returncode}")
        logger.debug(f"No tag matching '{pattern}' found, using fallback {fallback}")
        return fallback

    description = result.stdout.strip()
    logger.debug(f"git describe: {description}")
    return description


def is_dirty(directory: str) -> bool:
    """
    Check whether the working tree has uncommitted changes.

    A failure to query the status counts as a clean tree.

    Args:
        directory: Working tree to query

    Returns:
        bool: True if `git status --porcelain` reported any entries
    """
    try:
        result = _run_git(['status', '--porcelain'], directory)
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"git status unavailable ({e}), assuming clean tree")
        return False

    if result.returncode != 0:
        logger.debug(f"git status failed: {result.stderr.strip() or result.returncode}")
        return False

    dirty = bool(result.stdout.strip())
    if dirty:
        logger.debug("Working tree has uncommitted changes")
    return dirty
