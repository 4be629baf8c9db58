"""OpenGL version string parsing and extension lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

KNOWN_VERSIONS: tuple[tuple[int, int], ...] = (
    (1, 0), (1, 1), (1, 2), (1, 3), (1, 4), (1, 5),
    (2, 0), (2, 1),
    (3, 0), (3, 1), (3, 2), (3, 3),
)

_PREFIXES = ("OpenGL ES-CM ", "OpenGL ES-CL ", "OpenGL ES ")
_NUMBERS = re.compile(r"\s*([+-]?\d+)\.\s*([+-]?\d+)")


@dataclass(frozen=True, order=True)
class GLVersion:
    """A major/minor OpenGL version."""

    major: int
    minor: int

    def supports(self, major: int, minor: int) -> bool:
        """True if this version is at least ``major.minor``."""
        return (self.major == major and self.minor >= minor) or self.major > major

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"


def parse_version(version: str | None) -> GLVersion:
    """Parse a GL_VERSION string, skipping any OpenGL ES prefix."""
    if not version:
        raise ValueError("empty OpenGL version string")
    for prefix in _PREFIXES:
        if version.startswith(prefix):
            version = version[len(prefix):]
            break
    match = _NUMBERS.match(version)
    if match is None:
        raise ValueError(f"unparsable OpenGL version: {version!r}")
    return GLVersion(int(match.group(1)), int(match.group(2)))


def version_flags(version: GLVersion) -> dict[tuple[int, int], bool]:
    """Map each known core version to whether ``version`` provides it."""
    return {known: version.supports(*known) for known in KNOWN_VERSIONS}


def max_loaded_version(version: GLVersion) -> GLVersion:
    """The highest version whose entry points get loaded, capped at 3.3."""
    if version.major > 3 or (version.major >= 3 and version.minor >= 3):
        return GLVersion(3, 3)
    return version


def has_extension(extensions: str | Iterable[str | None] | None, ext: str | None) -> bool:
    """Look an extension up in a space-separated string or a list of names."""
    if extensions is None or ext is None:
        return False
    if isinstance(extensions, str):
        return ext in extensions.split(" ")
    return any(name is not None and name == ext for name in extensions)