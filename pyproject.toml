[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "snakegl"
version = "0.1.0"
description = "OpenGL version parsing and entry-point resolution up to core 3.3"
requires-python = ">=3.10"
keywords = ["opengl", "loader", "entry points", "gl version", "extensions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Multimedia :: Graphics",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["snakegl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
