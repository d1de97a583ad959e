# SPDX-License-Identifier: MIT
"""Pydantic models for exchanging versions with other data formats."""

from __future__ import annotations

from typing import Annotated, Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    WithJsonSchema,
    model_validator,
)

from .errors import VersionError
from .semver import SEMVER_PATTERN, Version, parse_version


class VersionRecord(BaseModel):
    """Structured form of a Version.

    Empty ``pre_release`` and ``build`` are left out when dumped with
    ``exclude_none=True`` (see ``as_dict``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    major: int = Field(..., ge=0, description="Major version number")
    minor: int = Field(..., ge=0, description="Minor version number")
    patch: int = Field(..., ge=0, description="Patch version number")
    pre_release: Optional[str] = Field(
        None, description="Pre-release identifiers (e.g., 'alpha.1', 'rc.2')"
    )
    build: Optional[str] = Field(None, description="Build metadata (e.g., 'build.123')")

    @model_validator(mode="after")
    def check_version(self) -> VersionRecord:
        """Reject records that do not form a valid semantic version."""
        try:
            self.to_version()
        except VersionError as e:
            raise ValueError(e.message) from e
        return self

    def to_version(self) -> Version:
        """Build the Version described by this record."""
        return Version(
            major=self.major,
            minor=self.minor,
            patch=self.patch,
            prerelease=self.pre_release or None,
            build=self.build or None,
        )


def to_record(version: Version) -> VersionRecord:
    """Convert a Version into its structured record."""
    return VersionRecord(
        major=version.major,
        minor=version.minor,
        patch=version.patch,
        pre_release=version.prerelease,
        build=version.build,
    )


def as_dict(version: Version) -> dict[str, Any]:
    """Return the version as a plain dict, omitting empty pre_release/build.

    Examples:
        >>> as_dict(parse_version("1.2.3-beta"))
        {'major': 1, 'minor': 2, 'patch': 3, 'pre_release': 'beta'}
    """
    return to_record(version).model_dump(exclude_none=True)


def _coerce_version(value: Any) -> Version:
    if isinstance(value, Version):
        return value
    if isinstance(value, str):
        try:
            return parse_version(value)
        except VersionError as e:
            raise ValueError(e.message) from e
    raise ValueError(f"Expected a version string, got {type(value).__name__}")


# Same grammar as SEMVER_PATTERN, also allowing the tag prefix and
# surrounding whitespace that parse_version accepts
_SCHEMA_PATTERN = r"^\s*v?" + SEMVER_PATTERN.pattern[1:-1] + r"\s*$"


# Field type for pydantic models: accepts a version string or a Version and
# serializes as the canonical string.
SemVerStr = Annotated[
    Version,
    PlainValidator(_coerce_version),
    PlainSerializer(lambda v: v.to_canonical_string(), return_type=str),
    WithJsonSchema({"type": "string", "pattern": _SCHEMA_PATTERN}),
]
