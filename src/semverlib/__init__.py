# SPDX-License-Identifier: MIT
"""Semantic version parsing, rendering and comparison.

This package parses version strings following the SemVer 2.0.0
specification, renders them back in canonical or tag form, and orders them
by SemVer precedence.

Example:
    >>> from semverlib import parse_version, must_parse, compare_versions
    >>>
    >>> version = parse_version("v1.2.3-beta+exp.sha.5114f85")
    >>> version.prerelease
    'beta'
    >>> str(version)
    '1.2.3-beta+exp.sha.5114f85'
    >>> version.to_tag_string()
    'v1.2.3-beta+exp.sha.5114f85'
    >>>
    >>> must_parse("1.0.0") > must_parse("1.0.0-rc.1")
    True
    >>> compare_versions("2.0.0", "1.9.9")
    1
"""

__version__ = "0.1.0"

from .errors import (
    ErrorKind,
    VersionError,
    EmptyInputError,
    InvalidFormatError,
    VersionLiteralError,
)
from .semver import (
    Version,
    parse_version,
    must_parse,
    is_valid_semver,
    compare_versions,
    SEMVER_PATTERN,
    TAG_PREFIX,
    MAX_COMPONENT,
)
from .compare import (
    compare_identifiers,
    compare_prerelease,
)
from .record import (
    VersionRecord,
    SemVerStr,
    to_record,
    as_dict,
)

__all__ = [
    # Errors
    "ErrorKind",
    "VersionError",
    "EmptyInputError",
    "InvalidFormatError",
    "VersionLiteralError",
    # Version parsing and rendering
    "Version",
    "parse_version",
    "must_parse",
    "is_valid_semver",
    "SEMVER_PATTERN",
    "TAG_PREFIX",
    "MAX_COMPONENT",
    # Version comparison
    "compare_versions",
    "compare_identifiers",
    "compare_prerelease",
    # Structured records
    "VersionRecord",
    "SemVerStr",
    "to_record",
    "as_dict",
]
