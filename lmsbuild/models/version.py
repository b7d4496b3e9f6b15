"""CMake-style version numbers and compatibility policies."""

import re
from enum import Enum
from functools import total_ordering

from lmsbuild.core.errors import VersionError


_VERSION_RE = re.compile(r"^\d+(\.\d+){0,3}$")


class VersionCompatibility(str, Enum):
    """Compatibility policies understood by generated version files."""

    ANY_NEWER = "AnyNewerVersion"
    SAME_MAJOR = "SameMajorVersion"
    SAME_MINOR = "SameMinorVersion"
    EXACT = "ExactVersion"


@total_ordering
class Version:
    """A ``major[.minor[.patch[.tweak]]]`` version.

    Missing components compare as zero, so ``2`` == ``2.0`` == ``2.0.0``.
    The original text is kept for display.
    """

    __slots__ = ("text", "components")

    def __init__(self, text: str) -> None:
        text = str(text).strip()
        if not _VERSION_RE.match(text):
            raise VersionError(
                f"Invalid version string: '{text}'",
                {"expected": "major[.minor[.patch[.tweak]]]"},
            )
        self.text = text
        self.components: tuple[int, ...] = tuple(int(p) for p in text.split("."))

    @classmethod
    def parse(cls, text: "str | Version") -> "Version":
        if isinstance(text, Version):
            return text
        return cls(text)

    def _padded(self) -> tuple[int, int, int, int]:
        padded = self.components + (0,) * (4 - len(self.components))
        return padded  # type: ignore[return-value]

    @property
    def major(self) -> int:
        return self._padded()[0]

    @property
    def minor(self) -> int:
        return self._padded()[1]

    @property
    def patch(self) -> int:
        return self._padded()[2]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._padded() == other._padded()

    def __lt__(self, other: "Version") -> bool:
        return self._padded() < other._padded()

    def __hash__(self) -> int:
        return hash(self._padded())

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Version('{self.text}')"


def parse_compatibility(value: "str | VersionCompatibility") -> VersionCompatibility:
    """Parse a compatibility policy name, rejecting unknown policies."""
    try:
        return VersionCompatibility(value)
    except ValueError as e:
        valid = [policy.value for policy in VersionCompatibility]
        raise VersionError(
            f"Unknown version compatibility policy: '{value}'", {"valid": valid}
        ) from e


def is_compatible(
    installed: "str | Version",
    requested: "str | Version",
    policy: "str | VersionCompatibility" = VersionCompatibility.ANY_NEWER,
) -> bool:
    """Decide whether an installed package satisfies a requested version.

    Mirrors the checks performed by CMake's basic package version files.
    """
    installed_v = Version.parse(installed)
    requested_v = Version.parse(requested)
    policy = parse_compatibility(policy)

    if installed_v < requested_v:
        return False
    if policy == VersionCompatibility.ANY_NEWER:
        return True
    if policy == VersionCompatibility.SAME_MAJOR:
        return installed_v.major == requested_v.major
    if policy == VersionCompatibility.SAME_MINOR:
        return (installed_v.major, installed_v.minor) == (
            requested_v.major,
            requested_v.minor,
        )
    return installed_v == requested_v
