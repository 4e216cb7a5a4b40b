[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgarray"
version = "0.11.1"
description = "Multi-dimensional arrays with per-dimension lower bounds, and the PostgreSQL binary array format"
requires-python = ">=3.10"
dependencies = []
keywords = ["postgresql", "postgres", "array", "binary", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pgarray"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
