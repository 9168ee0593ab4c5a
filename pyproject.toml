[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tzcli"
version = "0.1.0"
description = "Show the current time in a personal list of time zones from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["timezone", "time", "clock", "cli", "world-clock"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tz = "tzcli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tzcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
