[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hamlogkit"
version = "0.1.0"
description = "Contest logging helpers for amateur radio: settings files, satellite TLE handling, Doppler tracking, SO2R switching and rig commands"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "ham radio",
    "amateur radio",
    "contest logging",
    "satellite",
    "TLE",
    "doppler",
    "SO2R",
    "CI-V",
    "CAT",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hamlogkit"]

[tool.hatch.build.targets.sdist]
include = ["hamlogkit", "tests", "README.md"]

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
