[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crayfish"
version = "0.1.0"
description = "A small path-tracing renderer of spheres with diffuse, metal and glass materials"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["ray tracing", "path tracing", "rendering", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crayfish = "crayfish.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["crayfish"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
