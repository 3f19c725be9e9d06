[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bizcal"
version = "2.0.0"
description = "Holiday calendars and business-day arithmetic: workdays, working hours and national holiday rules."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "calendar",
    "holidays",
    "business days",
    "workdays",
    "working hours",
    "easter",
    "julian date",
]
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
    "Topic :: Office/Business :: Scheduling",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bizcal"]

[tool.hatch.build.targets.sdist]
include = ["bizcal", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
files = ["bizcal"]
