"""Entry points introduced by the OpenGL 1.x core versions, in load order."""

from __future__ import annotations

from snakegl.gl_version import GLVersion

LEGACY_ENTRY_POINTS: dict[tuple[int, int], tuple[str, ...]] = {
    (1, 0): (
        "glCullFace",
        "glFrontFace",
        "glHint",
        "glLineWidth",
        "glPointSize",
        "glPolygonMode",
        "glScissor",
        "glTexParameterf",
        "glTexParameterfv",
        "glTexParameteri",
        "glTexParameteriv",
        "glTexImage1D",
        "glTexImage2D",
        "glDrawBuffer",
        "glClear",
        "glClearColor",
        "glClearStencil",
        "glClearDepth",
        "glStencilMask",
        "glColorMask",
        "glDepthMask",
        "glDisable",
        "glEnable",
        "glFinish",
        "glFlush",
        "glBlendFunc",
        "glLogicOp",
        "glStencilFunc",
        "glStencilOp",
        "glDepthFunc",
        "glPixelStoref",
        "glPixelStorei",
        "glReadBuffer",
        "glReadPixels",
        "glGetBooleanv",
        "glGetDoublev",
        "glGetError",
        "glGetFloatv",
        "glGetIntegerv",
        "glGetString",
        "glGetTexImage",
        "glGetTexParameterfv",
        "glGetTexParameteriv",
        "glGetTexLevelParameterfv",
        "glGetTexLevelParameteriv",
        "glIsEnabled",
        "glDepthRange",
        "glViewport",
    ),
    (1, 1): (
        "glDrawArrays",
        "glDrawElements",
        "glPolygonOffset",
        "glCopyTexImage1D",
        "glCopyTexImage2D",
        "glCopyTexSubImage1D",
        "glCopyTexSubImage2D",
        "glTexSubImage1D",
        "glTexSubImage2D",
        "glBindTexture",
        "glDeleteTextures",
        "glGenTextures",
        "glIsTexture",
    ),
    (1, 2): (
        "glDrawRangeElements",
        "glTexImage3D",
        "glTexSubImage3D",
        "glCopyTexSubImage3D",
    ),
    (1, 3): (
        "glActiveTexture",
        "glSampleCoverage",
        "glCompressedTexImage3D",
        "glCompressedTexImage2D",
        "glCompressedTexImage1D",
        "glCompressedTexSubImage3D",
        "glCompressedTexSubImage2D",
        "glCompressedTexSubImage1D",
        "glGetCompressedTexImage",
    ),
    (1, 4): (
        "glBlendFuncSeparate",
        "glMultiDrawArrays",
        "glMultiDrawElements",
        "glPointParameterf",
        "glPointParameterfv",
        "glPointParameteri",
        "glPointParameteriv",
        "glBlendColor",
        "glBlendEquation",
    ),
    (1, 5): (
        "glGenQueries",
        "glDeleteQueries",
        "glIsQuery",
        "glBeginQuery",
        "glEndQuery",
        "glGetQueryiv",
        "glGetQueryObjectiv",
        "glGetQueryObjectuiv",
        "glBindBuffer",
        "glDeleteBuffers",
        "glGenBuffers",
        "glIsBuffer",
        "glBufferData",
        "glBufferSubData",
        "glGetBufferSubData",
        "glMapBuffer",
        "glUnmapBuffer",
        "glGetBufferParameteriv",
        "glGetBufferPointerv",
    ),
}


def legacy_entry_points(version: GLVersion) -> list[str]:
    """Names of the 1.x entry points to load for ``version``, in load order."""
    return [
        name
        for (major, minor), names in LEGACY_ENTRY_POINTS.items()
        if version.supports(major, minor)
        for name in names
    ]