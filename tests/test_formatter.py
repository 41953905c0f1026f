"""
Tests for formatter.py module.

Tests composite expansion, placeholder substitution, and separator cleanup.
"""

import pytest

from vermouth.formatter import (
    FULL_VERSION_TEMPLATE,
    base_version,
    expand_composite,
    format_version,
    normalize_separators,
    substitute,
)
from vermouth.version_info import VersionInfo


@pytest.fixture
def full_info():
    return VersionInfo(
        major='1', minor='2', patch='3',
        prerelease='beta1', commits='5',
        timestamp='20251205143022', metadata='build'
    )


class TestExpandComposite:
    """Test {version+} expansion."""

    def test_expands(self):
        assert expand_composite('v{version+}') == 'v' + FULL_VERSION_TEMPLATE

    def test_every_occurrence(self):
        assert expand_composite('{version+}/{version+}') == FULL_VERSION_TEMPLATE + '/' + FULL_VERSION_TEMPLATE

    def test_no_composite(self):
        assert expand_composite('{version}') == '{version}'


class TestBaseVersion:
    def test_full(self, full_info):
        assert base_version(full_info) == '1.2.3'

    def test_opaque(self):
        assert base_version(VersionInfo(major='custom')) == 'custom'


class TestSubstitute:
    """Test base placeholder replacement."""

    def test_all_placeholders(self, full_info):
        fmt = '{major}|{minor}|{patch}|{version}|{prerelease}|{commits}|{timestamp}|{metadata}'
        assert substitute(fmt, full_info) == '1|2|3|1.2.3|beta1|5|20251205143022|build'

    def test_empty_fields(self):
        info = VersionInfo(major='1', minor='0', patch='0')
        assert substitute('{version}-{prerelease}', info) == '1.0.0-'

    def test_unknown_placeholder_untouched(self, full_info):
        assert substitute('{branch}', full_info) == '{branch}'


class TestNormalizeSeparators:
    """Test separator cleanup."""

    def test_triple_run(self):
        assert normalize_separators('1.0.0---5') == '1.0.0-5'

    def test_long_mixed_run(self):
        assert normalize_separators('1.0.0---+build') == '1.0.0+build'

    def test_plus_then_dash(self):
        assert normalize_separators('1.0.0+-x') == '1.0.0-x'

    def test_trailing_dash(self):
        assert normalize_separators('1.2.3-') == '1.2.3'

    def test_trailing_plus(self):
        assert normalize_separators('1.2.3+') == '1.2.3'

    def test_trailing_run(self):
        assert normalize_separators('1.2.3---+') == '1.2.3'

    def test_leading_separator_kept(self):
        assert normalize_separators('-1.2.3') == '-1.2.3'

    @pytest.mark.parametrize('text', [
        '1.0.0---5',
        '1.2.3-beta1-5-+build',
        '1.2.3++meta',
        '+-+-',
        '',
    ])
    def test_idempotent(self, text):
        once = normalize_separators(text)
        assert normalize_separators(once) == once


class TestFormatVersion:
    """Test full template rendering."""

    def test_full_version(self, full_info):
        assert format_version(full_info, '{version+}') == '1.2.3-beta1-5-20251205143022+build'

    def test_clean_tree_with_metadata(self):
        info = VersionInfo(major='1', minor='2', patch='3', prerelease='beta1', commits='5', metadata='build')
        assert format_version(info, '{version+}') == '1.2.3-beta1-5+build'

    def test_exact_tag(self):
        info = VersionInfo(major='1', minor='2', patch='3')
        assert format_version(info, '{version+}') == '1.2.3'

    def test_commits_without_prerelease(self):
        info = VersionInfo(major='1', minor='0', patch='0', commits='5')
        assert format_version(info, '{version+}') == '1.0.0-5'

    def test_prefix(self, full_info):
        assert format_version(full_info, 'v{version}') == 'v1.2.3'

    def test_major_minor(self, full_info):
        assert format_version(full_info, '{major}.{minor}') == '1.2'

    def test_snapshot_suffix(self, full_info):
        assert format_version(full_info, '{version}-SNAPSHOT') == '1.2.3-SNAPSHOT'

    def test_opaque_default(self):
        assert format_version(VersionInfo(major='custom'), '{version}') == 'custom'

    def test_default_format(self, full_info):
        assert format_version(full_info) == '1.2.3-beta1-5-20251205143022+build'
