[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskassistant"
version = "0.1.0"
description = "A small desk assistant: important-day countdowns, memos, weather and daily tips"
requires-python = ">=3.10"
dependencies = []
keywords = ["memo", "reminder", "countdown", "weather", "important-days", "assistant"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskassistant = "deskassistant.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["deskassistant"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
