# SPDX-License-Identifier: MIT
"""Unit tests for version precedence."""

import pytest

from semverlib import (
    InvalidFormatError,
    compare_identifiers,
    compare_prerelease,
    compare_versions,
    parse_version,
)


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.9.9") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_numeric_not_lexical(self):
        """Test that components compare numerically."""
        assert compare_versions("1.10.0", "1.9.0") == 1
        assert compare_versions("18446744073709551615.0.0", "18446744073709551614.0.0") == 1

    def test_major_short_circuits(self):
        """Test that a higher major wins regardless of later fields."""
        assert compare_versions("2.0.0-alpha", "1.99.99") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.0.0-rc.1+a", "1.0.0-rc.1+b") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        v1 = parse_version("1.0.0")
        v2 = parse_version("2.0.0")
        assert compare_versions(v1, v2) == -1
        assert v1.compare(v2) == -1
        assert v2.compare(v1) == 1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("v1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise."""
        with pytest.raises(InvalidFormatError):
            compare_versions("1.0", "1.0.0")


class TestPrereleaseOrdering:
    """Tests for pre-release precedence rules."""

    def test_semver_example_chain(self):
        """Test the ordering example from the SemVer 2.0.0 specification."""
        versions = [
            "1.0.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-alpha.beta",
            "1.0.0-beta",
            "1.0.0-beta.2",
            "1.0.0-beta.11",
            "1.0.0-rc.1",
            "1.0.0",
        ]
        for i in range(len(versions) - 1):
            assert (
                compare_versions(versions[i], versions[i + 1]) == -1
            ), f"{versions[i]} should be < {versions[i + 1]}"

    def test_numeric_identifiers(self):
        """Test numeric pre-release identifiers compare numerically."""
        assert compare_versions("1.0.0-1", "1.0.0-2") == -1
        assert compare_versions("1.0.0-10", "1.0.0-2") == 1
        assert compare_versions("1.0.0-alpha.9", "1.0.0-alpha.10") == -1

    def test_numeric_lower_than_alphanumeric(self):
        """Test that numeric identifiers sort before alphanumeric ones."""
        assert compare_versions("1.0.0-999", "1.0.0-a") == -1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.a") == -1

    def test_ascii_ordering(self):
        """Test that alphanumeric identifiers compare in ASCII order."""
        assert compare_versions("1.0.0-Beta", "1.0.0-alpha") == -1
        assert compare_versions("1.0.0-0a", "1.0.0-a") == -1

    def test_longer_prerelease_is_greater(self):
        """Test that more fields win when all preceding fields are equal."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.0") == -1
        assert compare_versions("1.0.0-alpha.1.1", "1.0.0-alpha.1") == 1


class TestCompareHelpers:
    """Tests for the lower level comparison helpers."""

    def test_compare_identifiers(self):
        """Test single identifier comparison."""
        assert compare_identifiers("2", "10") == -1
        assert compare_identifiers("10", "10") == 0
        assert compare_identifiers("b", "a") == 1
        assert compare_identifiers("1", "a") == -1
        assert compare_identifiers("a", "1") == 1

    def test_compare_prerelease_release(self):
        """Test that a missing pre-release ranks above any pre-release."""
        assert compare_prerelease(None, None) == 0
        assert compare_prerelease(None, "alpha") == 1
        assert compare_prerelease("alpha", None) == -1
        assert compare_prerelease("", "alpha") == 1

    def test_compare_prerelease_fields(self):
        """Test field-wise pre-release comparison."""
        assert compare_prerelease("rc.10", "rc.9") == 1
        assert compare_prerelease("rc.1", "rc.1") == 0


class TestOperators:
    """Tests for rich comparison operators on Version."""

    def test_ordering_operators(self):
        """Test <, <=, > and >= follow precedence."""
        a = parse_version("1.0.0-alpha")
        b = parse_version("1.0.0")
        assert a < b
        assert a <= b
        assert b > a
        assert b >= a
        assert not b < a

    def test_build_only_difference(self):
        """Test operators treat build-only differences as equal."""
        a = parse_version("1.0.0+a")
        b = parse_version("1.0.0+b")
        assert a <= b and a >= b
        assert not a < b and not a > b

    def test_sorted(self):
        """Test that sorted() uses precedence."""
        versions = [parse_version(s) for s in ("2.0.0", "1.0.0", "1.0.0-rc.1", "1.10.0")]
        assert [str(v) for v in sorted(versions)] == ["1.0.0-rc.1", "1.0.0", "1.10.0", "2.0.0"]

    def test_compare_with_other_type(self):
        """Test that ordering against a non-Version raises TypeError."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "2.0.0"  # type: ignore

    def test_compare_method_with_other_type(self):
        """Test that compare() rejects a non-Version with TypeError."""
        with pytest.raises(TypeError):
            parse_version("1.0.0").compare("2.0.0")  # type: ignore
        with pytest.raises(TypeError):
            compare_versions(parse_version("1.0.0"), 2)  # type: ignore
