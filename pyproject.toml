[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taguchi"
version = "0.2.0"
description = "Orthogonal array (Taguchi) constructions for experimental design"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "orthogonal-array",
    "taguchi",
    "design-of-experiments",
    "statistics",
    "galois-field",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["taguchi"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
