# SPDX-License-Identifier: MIT
"""Errors raised while parsing semantic versions."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Variant tag carried by every VersionError."""

    EMPTY_INPUT = "empty_input"
    INVALID_FORMAT = "invalid_format"


class VersionError(ValueError):
    """Base class for strings that do not denote a valid semantic version.

    Attributes:
        version: The offending input, as it was given
        message: Human readable description of the failure
        kind: Which variant of failure this is
    """

    kind: ErrorKind

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version!r}"
        super().__init__(self.message)


class EmptyInputError(VersionError):
    """Raised when the version string is empty or only whitespace."""

    kind = ErrorKind.EMPTY_INPUT

    def __init__(self, version: str = "", message: str = ""):
        super().__init__(version, message or "Version string cannot be empty")


class InvalidFormatError(VersionError):
    """Raised when a non-empty string does not match the SemVer 2.0.0 grammar."""

    kind = ErrorKind.INVALID_FORMAT


class VersionLiteralError(RuntimeError):
    """Raised by must_parse when a version literal is invalid.

    This is a programming error rather than bad user input, which is why it
    is not a ValueError. The underlying VersionError is kept on ``error``.
    """

    def __init__(self, error: VersionError):
        self.error = error
        super().__init__(f"invalid version literal: {error.message}")
