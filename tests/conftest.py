"""
Pytest configuration and shared fixtures for test suite.

Provides a ready-made Config, a fixed clock, and helpers for faking the
git subprocess calls.
"""

import subprocess
import pytest
from datetime import datetime
from unittest.mock import MagicMock

from vermouth.config import Config


@pytest.fixture
def make_config(tmp_path):
    """Return a factory building a Config rooted in a temporary directory."""
    def _make(**overrides):
        values = dict(
            directory=str(tmp_path),
            pattern='v*.*.*',
            default_version='0.0.1',
            format='{version+}',
            timestamp_format='YYYYMMddHHmmss',
            metadata='',
            log_level='WARNING'
        )
        values.update(overrides)
        return Config(**values)
    return _make


@pytest.fixture
def fixed_now():
    """A fixed local time: 2025-12-05 14:30:22."""
    return datetime(2025, 12, 5, 14, 30, 22)


def _completed(stdout='', returncode=0, stderr=''):
    """Build a CompletedProcess like subprocess.run(..., text=True) returns."""
    return subprocess.CompletedProcess(args=['git'], returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def fake_git():
    """Return a factory for subprocess.run side effects answering git commands."""
    return _fake_git


def _fake_git(describe_output=None, status_output=''):
    """
    Build a side_effect for subprocess.run that answers git commands.

    Args:
        describe_output: `git describe` stdout, or None to make it fail
        status_output: `git status --porcelain` stdout, or None to make it fail
    """
    def _run(cmd, **kwargs):
        if cmd[1] == 'describe':
            if describe_output is None:
                return _completed(returncode=128, stderr='fatal: No names found, cannot describe anything.')
            return _completed(describe_output + '\n')
        if cmd[1] == 'status':
            if status_output is None:
                return _completed(returncode=128, stderr='fatal: not a git repository')
            return _completed(status_output)
        raise AssertionError(f'unexpected command: {cmd}')
    return MagicMock(side_effect=_run)
