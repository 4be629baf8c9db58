"""Entry points introduced by the OpenGL 2.0 to 3.3 core versions, in load order."""

from __future__ import annotations

from snakegl.gl_version import GLVersion

CORE_ENTRY_POINTS: dict[tuple[int, int], tuple[str, ...]] = {
    (2, 0): (
        "glBlendEquationSeparate",
        "glDrawBuffers",
        "glStencilOpSeparate",
        "glStencilFuncSeparate",
        "glStencilMaskSeparate",
        "glAttachShader",
        "glBindAttribLocation",
        "glCompileShader",
        "glCreateProgram",
        "glCreateShader",
        "glDeleteProgram",
        "glDeleteShader",
        "glDetachShader",
        "glDisableVertexAttribArray",
        "glEnableVertexAttribArray",
        "glGetActiveAttrib",
        "glGetActiveUniform",
        "glGetAttachedShaders",
        "glGetAttribLocation",
        "glGetProgramiv",
        "glGetProgramInfoLog",
        "glGetShaderiv",
        "glGetShaderInfoLog",
        "glGetShaderSource",
        "glGetUniformLocation",
        "glGetUniformfv",
        "glGetUniformiv",
        "glGetVertexAttribdv",
        "glGetVertexAttribfv",
        "glGetVertexAttribiv",
        "glGetVertexAttribPointerv",
        "glIsProgram",
        "glIsShader",
        "glLinkProgram",
        "glShaderSource",
        "glUseProgram",
        "glUniform1f",
        "glUniform2f",
        "glUniform3f",
        "glUniform4f",
        "glUniform1i",
        "glUniform2i",
        "glUniform3i",
        "glUniform4i",
        "glUniform1fv",
        "glUniform2fv",
        "glUniform3fv",
        "glUniform4fv",
        "glUniform1iv",
        "glUniform2iv",
        "glUniform3iv",
        "glUniform4iv",
        "glUniformMatrix2fv",
        "glUniformMatrix3fv",
        "glUniformMatrix4fv",
        "glValidateProgram",
        "glVertexAttrib1d",
        "glVertexAttrib1dv",
        "glVertexAttrib1f",
        "glVertexAttrib1fv",
        "glVertexAttrib1s",
        "glVertexAttrib1sv",
        "glVertexAttrib2d",
        "glVertexAttrib2dv",
        "glVertexAttrib2f",
        "glVertexAttrib2fv",
        "glVertexAttrib2s",
        "glVertexAttrib2sv",
        "glVertexAttrib3d",
        "glVertexAttrib3dv",
        "glVertexAttrib3f",
        "glVertexAttrib3fv",
        "glVertexAttrib3s",
        "glVertexAttrib3sv",
        "glVertexAttrib4Nbv",
        "glVertexAttrib4Niv",
        "glVertexAttrib4Nsv",
        "glVertexAttrib4Nub",
        "glVertexAttrib4Nubv",
        "glVertexAttrib4Nuiv",
        "glVertexAttrib4Nusv",
        "glVertexAttrib4bv",
        "glVertexAttrib4d",
        "glVertexAttrib4dv",
        "glVertexAttrib4f",
        "glVertexAttrib4fv",
        "glVertexAttrib4iv",
        "glVertexAttrib4s",
        "glVertexAttrib4sv",
        "glVertexAttrib4ubv",
        "glVertexAttrib4uiv",
        "glVertexAttrib4usv",
        "glVertexAttribPointer",
    ),
    (2, 1): (
        "glUniformMatrix2x3fv",
        "glUniformMatrix3x2fv",
        "glUniformMatrix2x4fv",
        "glUniformMatrix4x2fv",
        "glUniformMatrix3x4fv",
        "glUniformMatrix4x3fv",
    ),
    (3, 0): (
        "glColorMaski",
        "glGetBooleani_v",
        "glGetIntegeri_v",
        "glEnablei",
        "glDisablei",
        "glIsEnabledi",
        "glBeginTransformFeedback",
        "glEndTransformFeedback",
        "glBindBufferRange",
        "glBindBufferBase",
        "glTransformFeedbackVaryings",
        "glGetTransformFeedbackVarying",
        "glClampColor",
        "glBeginConditionalRender",
        "glEndConditionalRender",
        "glVertexAttribIPointer",
        "glGetVertexAttribIiv",
        "glGetVertexAttribIuiv",
        "glVertexAttribI1i",
        "glVertexAttribI2i",
        "glVertexAttribI3i",
        "glVertexAttribI4i",
        "glVertexAttribI1ui",
        "glVertexAttribI2ui",
        "glVertexAttribI3ui",
        "glVertexAttribI4ui",
        "glVertexAttribI1iv",
        "glVertexAttribI2iv",
        "glVertexAttribI3iv",
        "glVertexAttribI4iv",
        "glVertexAttribI1uiv",
        "glVertexAttribI2uiv",
        "glVertexAttribI3uiv",
        "glVertexAttribI4uiv",
        "glVertexAttribI4bv",
        "glVertexAttribI4sv",
        "glVertexAttribI4ubv",
        "glVertexAttribI4usv",
        "glGetUniformuiv",
        "glBindFragDataLocation",
        "glGetFragDataLocation",
        "glUniform1ui",
        "glUniform2ui",
        "glUniform3ui",
        "glUniform4ui",
        "glUniform1uiv",
        "glUniform2uiv",
        "glUniform3uiv",
        "glUniform4uiv",
        "glTexParameterIiv",
        "glTexParameterIuiv",
        "glGetTexParameterIiv",
        "glGetTexParameterIuiv",
        "glClearBufferiv",
        "glClearBufferuiv",
        "glClearBufferfv",
        "glClearBufferfi",
        "glGetStringi",
        "glIsRenderbuffer",
        "glBindRenderbuffer",
        "glDeleteRenderbuffers",
        "glGenRenderbuffers",
        "glRenderbufferStorage",
        "glGetRenderbufferParameteriv",
        "glIsFramebuffer",
        "glBindFramebuffer",
        "glDeleteFramebuffers",
        "glGenFramebuffers",
        "glCheckFramebufferStatus",
        "glFramebufferTexture1D",
        "glFramebufferTexture2D",
        "glFramebufferTexture3D",
        "glFramebufferRenderbuffer",
        "glGetFramebufferAttachmentParameteriv",
        "glGenerateMipmap",
        "glBlitFramebuffer",
        "glRenderbufferStorageMultisample",
        "glFramebufferTextureLayer",
        "glMapBufferRange",
        "glFlushMappedBufferRange",
        "glBindVertexArray",
        "glDeleteVertexArrays",
        "glGenVertexArrays",
        "glIsVertexArray",
    ),
    (3, 1): (
        "glDrawArraysInstanced",
        "glDrawElementsInstanced",
        "glTexBuffer",
        "glPrimitiveRestartIndex",
        "glCopyBufferSubData",
        "glGetUniformIndices",
        "glGetActiveUniformsiv",
        "glGetActiveUniformName",
        "glGetUniformBlockIndex",
        "glGetActiveUniformBlockiv",
        "glGetActiveUniformBlockName",
        "glUniformBlockBinding",
        "glBindBufferRange",
        "glBindBufferBase",
        "glGetIntegeri_v",
    ),
    (3, 2): (
        "glDrawElementsBaseVertex",
        "glDrawRangeElementsBaseVertex",
        "glDrawElementsInstancedBaseVertex",
        "glMultiDrawElementsBaseVertex",
        "glProvokingVertex",
        "glFenceSync",
        "glIsSync",
        "glDeleteSync",
        "glClientWaitSync",
        "glWaitSync",
        "glGetInteger64v",
        "glGetSynciv",
        "glGetInteger64i_v",
        "glGetBufferParameteri64v",
        "glFramebufferTexture",
        "glTexImage2DMultisample",
        "glTexImage3DMultisample",
        "glGetMultisamplefv",
        "glSampleMaski",
    ),
    (3, 3): (
        "glBindFragDataLocationIndexed",
        "glGetFragDataIndex",
        "glGenSamplers",
        "glDeleteSamplers",
        "glIsSampler",
        "glBindSampler",
        "glSamplerParameteri",
        "glSamplerParameteriv",
        "glSamplerParameterf",
        "glSamplerParameterfv",
        "glSamplerParameterIiv",
        "glSamplerParameterIuiv",
        "glGetSamplerParameteriv",
        "glGetSamplerParameterIiv",
        "glGetSamplerParameterfv",
        "glGetSamplerParameterIuiv",
        "glQueryCounter",
        "glGetQueryObjecti64v",
        "glGetQueryObjectui64v",
        "glVertexAttribDivisor",
        "glVertexAttribP1ui",
        "glVertexAttribP1uiv",
        "glVertexAttribP2ui",
        "glVertexAttribP2uiv",
        "glVertexAttribP3ui",
        "glVertexAttribP3uiv",
        "glVertexAttribP4ui",
        "glVertexAttribP4uiv",
        "glVertexP2ui",
        "glVertexP2uiv",
        "glVertexP3ui",
        "glVertexP3uiv",
        "glVertexP4ui",
        "glVertexP4uiv",
        "glTexCoordP1ui",
        "glTexCoordP1uiv",
        "glTexCoordP2ui",
        "glTexCoordP2uiv",
        "glTexCoordP3ui",
        "glTexCoordP3uiv",
        "glTexCoordP4ui",
        "glTexCoordP4uiv",
        "glMultiTexCoordP1ui",
        "glMultiTexCoordP1uiv",
        "glMultiTexCoordP2ui",
        "glMultiTexCoordP2uiv",
        "glMultiTexCoordP3ui",
        "glMultiTexCoordP3uiv",
        "glMultiTexCoordP4ui",
        "glMultiTexCoordP4uiv",
        "glNormalP3ui",
        "glNormalP3uiv",
        "glColorP3ui",
        "glColorP3uiv",
        "glColorP4ui",
        "glColorP4uiv",
        "glSecondaryColorP3ui",
        "glSecondaryColorP3uiv",
    ),
}


def core_entry_points(version: GLVersion) -> list[str]:
    """Names of the 2.0-3.3 entry points to load for ``version``, in load order.

    Names that several versions reintroduce appear once, at their first place.
    """
    ordered = (
        name
        for (major, minor), names in CORE_ENTRY_POINTS.items()
        if version.supports(major, minor)
        for name in names
    )
    return list(dict.fromkeys(ordered))