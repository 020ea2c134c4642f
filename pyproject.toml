[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "elmengine"
version = "0.1.0"
description = "Engine core for real-time rendering: events, layers, cameras, transforms, profiling and renderer descriptions"
requires-python = ">=3.10"
keywords = ["engine", "camera", "rendering", "events", "profiling", "graphics", "transforms"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["elmengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
