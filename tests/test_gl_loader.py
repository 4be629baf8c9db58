import pytest

from snakegl.gl_loader import (
    GL_EXTENSIONS,
    GL_NUM_EXTENSIONS,
    GL_VERSION,
    GLContext,
    GLLoadError,
    load_gl,
)
from snakegl.gl_procs_core import core_entry_points
from snakegl.gl_procs_legacy import legacy_entry_points
from snakegl.gl_version import GLVersion

EXTS = ("GL_ARB_debug_output", "GL_KHR_debug")


def make_loader(version="3.3.0 Driver", extensions=EXTS, missing=()):
    calls = []

    def get_string(name):
        if name == GL_VERSION:
            return None if version is None else version.encode()
        if name == GL_EXTENSIONS:
            return " ".join(extensions).encode()
        return None

    def get_integer(pname):
        return len(extensions) if pname == GL_NUM_EXTENSIONS else 0

    def get_stringi(name, index):
        return extensions[index].encode() if name == GL_EXTENSIONS else None

    special = {
        "glGetString": get_string,
        "glGetIntegerv": get_integer,
        "glGetStringi": get_stringi,
    }

    def load(name):
        calls.append(name)
        if name in missing:
            return None
        return special.get(name, lambda *args: None)

    return load, calls


def test_loads_core_33_context():
    load, _ = make_loader()
    ctx = load_gl(load)
    assert ctx.version == GLVersion(3, 3)
    assert "glBindVertexArray" in ctx
    assert ctx.extensions == EXTS
    assert ctx.has_extension("GL_KHR_debug")
    assert not ctx.has_extension("GL_KHR")


def test_load_order_follows_versions():
    load, calls = make_loader()
    ctx = load_gl(load)
    expected = list(
        dict.fromkeys(legacy_entry_points(ctx.version) + core_entry_points(ctx.version))
    )
    assert calls[0] == "glGetString"
    assert calls[1:] == expected


def test_older_version_uses_extension_string():
    load, _ = make_loader(version="2.1 Mesa")
    ctx = load_gl(load)
    assert ctx.version == GLVersion(2, 1)
    assert "glUseProgram" in ctx
    with pytest.raises(KeyError):
        ctx["glBindVertexArray"]
    assert ctx.extensions == " ".join(EXTS)
    assert ctx.has_extension("GL_ARB_debug_output")


def test_newer_version_is_capped_for_loading():
    load, _ = make_loader(version="4.6.0")
    ctx = load_gl(load)
    assert ctx.max_loaded == GLVersion(3, 3)
    assert all(ctx.flags.values())


def test_es_prefix_is_skipped():
    load, _ = make_loader(version="OpenGL ES 3.0 Mesa")
    ctx = load_gl(load)
    assert ctx.version == GLVersion(3, 0)
    assert ctx.flags[(3, 1)] is False


def test_missing_get_string_fails():
    load, _ = make_loader(missing=("glGetString",))
    with pytest.raises(GLLoadError):
        load_gl(load)


def test_missing_version_fails():
    load, _ = make_loader(version=None)
    with pytest.raises(GLLoadError):
        load_gl(load)


def test_unparsable_version_fails():
    load, _ = make_loader(version="garbage")
    with pytest.raises(GLLoadError):
        load_gl(load)


def test_zero_version_fails():
    load, _ = make_loader(version="0.0")
    with pytest.raises(GLLoadError):
        load_gl(load)


def test_no_extensions_on_core_profile_fails():
    load, _ = make_loader(extensions=())
    with pytest.raises(GLLoadError):
        load_gl(load)


def test_missing_stringi_on_core_profile_fails():
    load, _ = make_loader(missing=("glGetStringi",))
    with pytest.raises(GLLoadError):
        load_gl(load)


def test_missing_entry_point_is_absent():
    load, _ = make_loader(missing=("glDrawArrays",))
    ctx = load_gl(load)
    assert "glDrawArrays" not in ctx
    with pytest.raises(KeyError):
        ctx["glDrawArrays"]


def test_context_lookup_returns_proc():
    def proc():
        return 5

    ctx = GLContext(version=GLVersion(3, 3), procs={"glFinish": proc})
    assert ctx["glFinish"] is proc
    assert not ctx.has_extension("GL_KHR_debug")