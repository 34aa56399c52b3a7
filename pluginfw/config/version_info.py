"""Plugin version value - semantic version with an explicit null state."""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Optional, Tuple


@total_ordering
@dataclass(frozen=True)
class VersionInfo:
    """Semantic version (MAJOR.MINOR.PATCH) used by plugin configs.

    ``VersionInfo()`` is the null version: it means "not set" and is distinct
    from every real version, including ``0.0.0``. Null sorts before any real
    version and only equals another null version.
    """

    major: Optional[int] = None
    minor: Optional[int] = None
    patch: Optional[int] = None

    _VERSION_PATTERN = re.compile(r"([0-9]+)\.([0-9]+)\.([0-9]+)")

    @classmethod
    def null(cls) -> VersionInfo:
        """Return the null (unset) version."""
        return cls()

    @classmethod
    def parse(cls, version_str: str) -> VersionInfo:
        """Parse a "MAJOR.MINOR.PATCH" string.

        Args:
            version_str: Version string like "1.0.0".

        Returns:
            Parsed VersionInfo.

        Raises:
            ValueError: If the string is not a valid version.
        """
        match = cls._VERSION_PATTERN.fullmatch(version_str.strip())
        if not match:
            raise ValueError(f"Invalid version string: {version_str!r}")

        return cls(
            major=int(match.group(1)),
            minor=int(match.group(2)),
            patch=int(match.group(3)),
        )

    def is_null(self) -> bool:
        """True if this version is unset."""
        return self.major is None and self.minor is None and self.patch is None

    def is_valid(self) -> bool:
        """True if this is a real version with three non-negative parts."""
        if self.is_null():
            return False
        return all(
            isinstance(part, int) and not isinstance(part, bool) and part >= 0
            for part in (self.major, self.minor, self.patch)
        )

    @staticmethod
    def is_range_valid(min_version: VersionInfo, max_version: VersionInfo) -> bool:
        """Check that [min_version, max_version] is a usable inclusive range.

        Both bounds must be valid (hence non-null) and ``min_version`` must not
        be greater than ``max_version``. Equal bounds describe a single version.
        """
        if not (min_version.is_valid() and max_version.is_valid()):
            return False
        return min_version <= max_version

    def _sort_key(self) -> Tuple[Any, ...]:
        if self.is_null():
            return (0,)
        # Missing parts sort below every int part without colliding with one.
        return (1,) + tuple(_part_key(part) for part in (self.major, self.minor, self.patch))

    def __lt__(self, other: VersionInfo) -> bool:
        if not isinstance(other, VersionInfo):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        if self.is_null():
            return ""
        return f"{self.major}.{self.minor}.{self.patch}"


def _part_key(part: Any) -> Tuple[int, Any]:
    if isinstance(part, int):
        return (1, part)
    return (0, "" if part is None else repr(part))
