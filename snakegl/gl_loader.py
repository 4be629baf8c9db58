"""Resolve the OpenGL entry points a context provides, up to core 3.3."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from snakegl.gl_procs_core import core_entry_points
from snakegl.gl_procs_legacy import legacy_entry_points
from snakegl.gl_version import (
    GLVersion,
    has_extension,
    max_loaded_version,
    parse_version,
    version_flags,
)

GL_VERSION = 0x1F02
GL_EXTENSIONS = 0x1F03
GL_NUM_EXTENSIONS = 0x821D

Proc = Callable[..., Any]
LoadProc = Callable[[str], Optional[Proc]]


class GLLoadError(RuntimeError):
    """Raised when the OpenGL entry points cannot be loaded."""


@dataclass
class GLContext:
    """The version of a context and the entry points resolved for it."""

    version: GLVersion
    procs: dict[str, Proc] = field(default_factory=dict)
    extensions: str | tuple[str | None, ...] | None = None

    @property
    def max_loaded(self) -> GLVersion:
        return max_loaded_version(self.version)

    @property
    def flags(self) -> dict[tuple[int, int], bool]:
        return version_flags(self.version)

    def has_extension(self, ext: str | None) -> bool:
        """True if the context reported ``ext`` among its extensions."""
        return has_extension(self.extensions, ext)

    def __getitem__(self, name: str) -> Proc:
        try:
            return self.procs[name]
        except KeyError:
            raise KeyError(f"OpenGL entry point not loaded: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self.procs


def _text(value: bytes | str) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return value


def _maybe_text(value: bytes | str | None) -> str | None:
    return None if value is None else _text(value)


def _query_extensions(
    version: GLVersion, get_string: Proc, procs: dict[str, Proc]
) -> str | tuple[str | None, ...] | None:
    if max_loaded_version(version).major < 3:
        return _maybe_text(get_string(GL_EXTENSIONS))

    get_integer = procs.get("glGetIntegerv")
    get_stringi = procs.get("glGetStringi")
    if get_integer is None or get_stringi is None:
        raise GLLoadError("extension queries are unavailable")
    count = int(get_integer(GL_NUM_EXTENSIONS))
    if count <= 0:
        raise GLLoadError("the context reports no extensions")
    return tuple(_maybe_text(get_stringi(GL_EXTENSIONS, index)) for index in range(count))


def load_gl(load: LoadProc) -> GLContext:
    """Resolve every entry point the context's version provides through ``load``."""
    get_string = load("glGetString")
    if get_string is None:
        raise GLLoadError("glGetString is unavailable")
    raw_version = get_string(GL_VERSION)
    if raw_version is None:
        raise GLLoadError("the context reports no version")
    try:
        version = parse_version(_text(raw_version))
    except ValueError as exc:
        raise GLLoadError(str(exc)) from exc

    procs: dict[str, Proc] = {"glGetString": get_string}
    names = dict.fromkeys([*legacy_entry_points(version), *core_entry_points(version)])
    for name in names:
        proc = load(name)
        if proc is None:
            procs.pop(name, None)
        else:
            procs[name] = proc

    extensions = _query_extensions(version, procs.get("glGetString", get_string), procs)
    if version.major == 0 and version.minor == 0:
        raise GLLoadError("the context reports version 0.0")
    return GLContext(version=version, procs=procs, extensions=extensions)