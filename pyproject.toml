[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmodule"
version = "0.1.0"
description = "Building blocks for graded modules over polynomial rings: degree lists, monomial ideals, Hilbert functions and help-file reading"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "commutative algebra",
    "graded module",
    "degree list",
    "monomial ideal",
    "hilbert function",
    "hilbert series",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gmodule"]

[tool.hatch.build.targets.sdist]
include = ["gmodule", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
