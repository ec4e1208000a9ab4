#===============================================================================
#  World_Hash_Launcher | versioning.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-19
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Numeric, per-segment comparison of manifest version strings.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

from packaging.version import InvalidVersion, Version


def compare_versions(current: str, candidate: str) -> int:
    """Return 1 if ``candidate`` is newer than ``current``, -1 if older, 0 if equal.

    Versions that do not parse are only ever equal to the identical string;
    otherwise they sort by plain string order.
    """
    current = (current or "").strip()
    candidate = (candidate or "").strip()
    if current == candidate:
        return 0
    try:
        a, b = Version(current), Version(candidate)
    except InvalidVersion:
        return 1 if candidate > current else -1
    if a == b:
        return 0
    return 1 if b > a else -1


def versions_differ(current: str, candidate: str) -> bool:
    """True when an update should be offered (any difference, newer or older)."""
    return compare_versions(current, candidate) != 0
