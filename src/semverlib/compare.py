# SPDX-License-Identifier: MIT
"""Precedence rules for semantic versions (SemVer 2.0.0, section 11).

Build metadata never takes part in precedence. Pre-release identifiers are
compared field by field:

- identifiers consisting only of digits are compared numerically
- alphanumeric identifiers are compared lexically in ASCII order
- numeric identifiers always have lower precedence than alphanumeric ones
- a larger set of fields has higher precedence when all preceding
  identifiers are equal
"""

from __future__ import annotations

from typing import Optional


def _sign(a, b) -> int:
    if a == b:
        return 0
    return -1 if a < b else 1


def compare_identifiers(id1: str, id2: str) -> int:
    """Compare two single pre-release identifiers.

    Returns:
        -1 if id1 < id2
        0 if id1 == id2
        1 if id1 > id2
    """
    is_num1 = id1.isascii() and id1.isdigit()
    is_num2 = id2.isascii() and id2.isdigit()

    if is_num1 and is_num2:
        return _sign(int(id1), int(id2))
    if is_num1:
        return -1
    if is_num2:
        return 1
    return _sign(id1, id2)


def compare_prerelease(pre1: Optional[str], pre2: Optional[str]) -> int:
    """Compare two pre-release strings.

    ``None`` (or the empty string) means "no pre-release", which has higher
    precedence than any pre-release of the same version (1.0.0 > 1.0.0-alpha).

    Examples:
        >>> compare_prerelease("alpha.1", "alpha.beta")
        -1
        >>> compare_prerelease("rc.10", "rc.9")
        1
        >>> compare_prerelease(None, "rc.1")
        1
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    parts1 = pre1.split(".")
    parts2 = pre2.split(".")

    for p1, p2 in zip(parts1, parts2):
        result = compare_identifiers(p1, p2)
        if result:
            return result

    return _sign(len(parts1), len(parts2))


def compare_components(
    core1: tuple[int, int, int],
    pre1: Optional[str],
    core2: tuple[int, int, int],
    pre2: Optional[str],
) -> int:
    """Compare (major, minor, patch) triples, then pre-release.

    Evaluation stops at the first differing criterion.
    """
    for val1, val2 in zip(core1, core2):
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return compare_prerelease(pre1, pre2)
