"""Boolean build options with CMake truthiness."""

from typing import Any

from lmsbuild.models.base import LmsFrozenModel


_FALSE_CONSTANTS = {"0", "OFF", "NO", "FALSE", "N", "IGNORE", "NOTFOUND", ""}


def parse_cmake_bool(raw: Any) -> bool:
    """Interpret a value the way ``if(<value>)`` does for option values.

    ``ON``, ``YES``, ``TRUE``, ``Y`` and non-zero numbers are true. ``OFF``,
    ``NO``, ``FALSE``, ``N``, ``0``, ``IGNORE``, ``NOTFOUND``, anything ending
    in ``-NOTFOUND`` and the empty string are false.
    """
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int | float):
        return raw != 0
    text = str(raw).strip().upper()
    if text in _FALSE_CONSTANTS or text.endswith("-NOTFOUND"):
        return False
    try:
        return float(text) != 0
    except ValueError:
        return True


class BuildOption(LmsFrozenModel):
    """A named boolean toggle read once at configuration time."""

    name: str
    description: str
    default: bool = False

    def resolve(self, raw: Any = None) -> bool:
        """Resolve the option value; ``None`` means unset and yields the default."""
        if raw is None:
            return self.default
        return parse_cmake_bool(raw)

    @staticmethod
    def display(value: bool) -> str:
        return "ON" if value else "OFF"


USE_LIBRARY = BuildOption(
    name="USE_LIBRARY",
    description="Use the Library Management System",
    default=True,
)
