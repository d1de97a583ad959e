# SPDX-License-Identifier: MIT
"""Semantic version parsing and rendering (SemVer 2.0.0).

Supports MAJOR.MINOR.PATCH with optional pre-release and build metadata,
optionally preceded by a single ``v`` as used in source-control tags:

- Pre-release: -alpha, -alpha.1, -0.3.7, -x.7.z.92
- Build metadata: +build, +build.123, +exp.sha.5114f85, +001
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Optional, Union

from .compare import compare_components
from .errors import EmptyInputError, InvalidFormatError, VersionError, VersionLiteralError

TAG_PREFIX = "v"

# Upper bound for major/minor/patch, the range of an unsigned 64-bit integer
MAX_COMPONENT = 2**64 - 1
_MAX_COMPONENT_DIGITS = len(str(MAX_COMPONENT))

_NUMERIC = r"0|[1-9]\d*"
_PRERELEASE_ID = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_BUILD_ID = r"[0-9a-zA-Z-]+"
_PRERELEASE = rf"{_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*"
_BUILD = rf"{_BUILD_ID}(?:\.{_BUILD_ID})*"

# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    rf"^(?P<major>{_NUMERIC})"
    rf"\.(?P<minor>{_NUMERIC})"
    rf"\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<prerelease>{_PRERELEASE}))?"
    rf"(?:\+(?P<buildmetadata>{_BUILD}))?$",
    re.ASCII,
)

_PRERELEASE_PATTERN = re.compile(_PRERELEASE, re.ASCII)
_BUILD_PATTERN = re.compile(_BUILD, re.ASCII)


def _check_component(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidFormatError(
            repr(value), f"{name} must be an integer, got {type(value).__name__}"
        )
    if not 0 <= value <= MAX_COMPONENT:
        raise InvalidFormatError(
            str(value), f"{name} must be between 0 and {MAX_COMPONENT}, got {value}"
        )


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """A parsed semantic version.

    Equality, hashing and ordering follow SemVer precedence, so build
    metadata is ignored: ``1.0.0+a == 1.0.0+b``. Compare ``build``
    explicitly when the exact metadata matters.

    Attributes:
        major: Major version number (incompatible API changes)
        minor: Minor version number (backward compatible features)
        patch: Patch version number (backward compatible bug fixes)
        prerelease: Dot-separated pre-release identifiers, or None for a release
        build: Dot-separated build metadata, or None
    """

    major: int
    minor: int
    patch: int
    prerelease: Optional[str] = None
    build: Optional[str] = None

    def __post_init__(self) -> None:
        _check_component("major", self.major)
        _check_component("minor", self.minor)
        _check_component("patch", self.patch)

        # An empty suffix means "absent"
        if self.prerelease == "":
            object.__setattr__(self, "prerelease", None)
        if self.build == "":
            object.__setattr__(self, "build", None)

        if self.prerelease is not None and not (
            isinstance(self.prerelease, str) and _PRERELEASE_PATTERN.fullmatch(self.prerelease)
        ):
            raise InvalidFormatError(
                str(self.prerelease), f"Invalid pre-release: {self.prerelease!r}"
            )
        if self.build is not None and not (
            isinstance(self.build, str) and _BUILD_PATTERN.fullmatch(self.build)
        ):
            raise InvalidFormatError(str(self.build), f"Invalid build metadata: {self.build!r}")

    def __str__(self) -> str:
        return self.to_canonical_string()

    def to_canonical_string(self) -> str:
        """Return MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] without a prefix.

        Examples:
            >>> parse_version("v1.0.0-alpha+build.001").to_canonical_string()
            '1.0.0-alpha+build.001'
        """
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease}"
        if self.build:
            version += f"+{self.build}"
        return version

    def to_tag_string(self) -> str:
        """Return the canonical string prefixed with ``v``, as used for git tags.

        Examples:
            >>> parse_version("1.0.0-beta").to_tag_string()
            'v1.0.0-beta'
        """
        return TAG_PREFIX + self.to_canonical_string()

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_identifiers(self) -> tuple[str, ...]:
        """Return the dot-separated pre-release identifiers, empty for a release."""
        if self.prerelease is None:
            return ()
        return tuple(self.prerelease.split("."))

    def with_build(self, build: Optional[str]) -> Version:
        """Return a copy of this version carrying different build metadata."""
        return replace(self, build=build)

    def compare(self, other: Version) -> int:
        """Compare precedence with another version.

        Returns:
            -1 if self < other
            0 if self and other have equal precedence
            1 if self > other
        """
        if not isinstance(other, Version):
            raise TypeError(f"Cannot compare Version with {type(other).__name__}")
        return compare_components(
            (self.major, self.minor, self.patch),
            self.prerelease,
            (other.major, other.minor, other.patch),
            other.prerelease,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __hash__(self) -> int:
        return hash((self.major, self.minor, self.patch, self.prerelease))

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Surrounding whitespace and a single leading ``v`` are ignored. Pre-release
    and build metadata are kept exactly as written.

    Args:
        version_string: A string of the form [v]MAJOR.MINOR.PATCH[-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        EmptyInputError: If the string is empty or only whitespace
        InvalidFormatError: If the string does not follow semantic versioning,
            or a numeric component does not fit in 64 bits

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=None, build=None)

        >>> parse_version("v1.2.3-beta+exp.sha.5114f85")
        Version(major=1, minor=2, patch=3, prerelease='beta', build='exp.sha.5114f85')
    """
    if not isinstance(version_string, str):
        raise InvalidFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    text = version_string.strip()
    if not text:
        raise EmptyInputError(version_string)

    if text.startswith(TAG_PREFIX):
        text = text[len(TAG_PREFIX) :]

    match = SEMVER_PATTERN.match(text)
    if not match:
        raise InvalidFormatError(version_string)

    digits = [match.group(name) for name in ("major", "minor", "patch")]
    # Length check first: int() refuses very long digit strings on its own
    for value in digits:
        if len(value) > _MAX_COMPONENT_DIGITS or int(value) > MAX_COMPONENT:
            raise InvalidFormatError(
                version_string, f"Version component out of range: {value[:32]}"
            )
    major, minor, patch = (int(value) for value in digits)

    return Version(
        major=major,
        minor=minor,
        patch=patch,
        prerelease=match.group("prerelease"),
        build=match.group("buildmetadata"),
    )


def must_parse(version_string: str) -> Version:
    """Parse a version literal that is known to be valid.

    Meant for constants in source code. Never use it on user input: an
    invalid string is treated as a programming error.

    Raises:
        VersionLiteralError: Wrapping the EmptyInputError or InvalidFormatError
            raised by parse_version
    """
    try:
        return parse_version(version_string)
    except VersionError as err:
        raise VersionLiteralError(err) from err


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("v1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    try:
        parse_version(version_string)
    except VersionError:
        return False
    return True


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        VersionError: If either version string is invalid

    Examples:
        >>> compare_versions("2.0.0", "1.9.9")
        1
        >>> compare_versions("1.0.0-alpha", "1.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0+build.2")
        0
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return v1.compare(v2)
