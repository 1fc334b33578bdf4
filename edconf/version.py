#!/usr/bin/env python3

import re
from typing import List

from .errors import VersionError

__all__ = [
    "VERSION",
    "compare_versions",
    "check_version",
]

VERSION = "0.12.0-final"


def _components(version: str) -> List[int]:
    parts: List[int] = []
    for part in re.split(r"[.-]", version)[:3]:
        # Non-numeric components sort below every release number
        parts.append(int(part) if part.isdecimal() else -1)
    while len(parts) < 3:
        parts.append(-1)
    return parts


def compare_versions(version1: str, version2: str) -> int:
    """Compare the major, minor and patch components of two version strings.

    Returns:
        A negative number, zero or a positive number when version1 is older
        than, equal to or newer than version2
    """
    for v1, v2 in zip(_components(version1), _components(version2)):
        if v1 != v2:
            return v1 - v2
    return 0


def check_version(required: str) -> None:
    """Raise VersionError if `required` is newer than this core."""
    if compare_versions(required, VERSION) > 0:
        raise VersionError(
            f"Required version {required} is greater than the current version {VERSION}"
        )
