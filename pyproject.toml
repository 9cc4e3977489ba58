[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labviewer"
version = "2.0.0"
description = "Lab geometry and XML readers for a maze-robot simulation viewer: simulator replies, viewer parameter files and maze maps"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "simulation", "maze", "viewer", "xml"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
labviewer = "labviewer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["labviewer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
