[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "badgerkv"
version = "0.1.0"
description = "Building blocks of an LSM-tree key-value store: options, loggers, file loading modes, iterator table picking and key/value size histograms."
requires-python = ">=3.10"
dependencies = []
keywords = ["key-value", "lsm", "database", "storage", "histogram"]
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
    "Topic :: Database :: Database Engines/Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["badgerkv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
