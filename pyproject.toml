[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "anvil_engine"
version = "0.1.0"
description = "Core of a small rendering engine: meshes, cameras, resource registries, frame graphs and frame pacing."
requires-python = ">=3.10"
dependencies = []
keywords = ["rendering", "engine", "framegraph", "camera", "mesh", "fps"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["anvil_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
