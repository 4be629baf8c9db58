import pytest

from snakegl.gl_procs_core import core_entry_points
from snakegl.gl_procs_legacy import legacy_entry_points
from snakegl.gl_version import GLVersion, parse_version


def test_pre_2_0_versions_load_no_core_entry_points():
    assert core_entry_points(GLVersion(1, 5)) == []
    assert core_entry_points(GLVersion(1, 0)) == []


def test_2_0_starts_with_blend_equation_separate():
    names = core_entry_points(GLVersion(2, 0))
    assert names[0] == "glBlendEquationSeparate"
    assert names[-1] == "glVertexAttribPointer"


def test_2_0_has_shader_calls_but_not_2_1_matrices():
    names = core_entry_points(GLVersion(2, 0))
    for needed in ("glCreateProgram", "glAttachShader", "glLinkProgram",
                   "glGetUniformLocation", "glUniform3f", "glUniform4f"):
        assert needed in names
    assert "glUniformMatrix2x3fv" not in names


def test_2_1_adds_non_square_matrices():
    names = core_entry_points(GLVersion(2, 1))
    assert names[-1] == "glUniformMatrix4x3fv"
    assert "glGenVertexArrays" not in names


def test_3_0_adds_vertex_arrays():
    names = core_entry_points(GLVersion(3, 0))
    assert "glGenVertexArrays" in names
    assert "glBindVertexArray" in names
    assert "glDrawArraysInstanced" not in names


def test_3_3_ends_with_secondary_color():
    names = core_entry_points(parse_version("3.3.0 Mesa"))
    assert names[-1] == "glSecondaryColorP3uiv"
    assert "glVertexAttribDivisor" in names


def test_newer_versions_load_same_as_3_3():
    assert core_entry_points(GLVersion(4, 6)) == core_entry_points(GLVersion(3, 3))


def test_no_duplicate_names():
    names = core_entry_points(GLVersion(3, 3))
    assert len(names) == len(set(names))


def test_reintroduced_names_keep_first_position():
    names = core_entry_points(GLVersion(3, 1))
    assert names.index("glBindBufferRange") < names.index("glGenVertexArrays")
    assert names.index("glGetIntegeri_v") < names.index("glDrawArraysInstanced")


@pytest.mark.parametrize(
    "lower, higher",
    [((2, 0), (2, 1)), ((2, 1), (3, 0)), ((3, 0), (3, 1)),
     ((3, 1), (3, 2)), ((3, 2), (3, 3))],
)
def test_higher_version_extends_lower_as_prefix(lower, higher):
    small = core_entry_points(GLVersion(*lower))
    big = core_entry_points(GLVersion(*higher))
    assert len(big) > len(small)
    assert big[: len(small)] == small


def test_disjoint_from_legacy_entry_points():
    version = GLVersion(3, 3)
    assert set(core_entry_points(version)).isdisjoint(legacy_entry_points(version))


def test_all_names_are_gl_prefixed():
    assert all(name.startswith("gl") for name in core_entry_points(GLVersion(3, 3)))