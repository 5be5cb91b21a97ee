[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clubsim"
version = "0.1.0"
description = "Simulate a day of a computer club from an event log and report per-table revenue and usage"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "event log", "billing", "computer club"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clubsim = "clubsim.club:main"

[tool.hatch.build.targets.wheel]
packages = ["clubsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
