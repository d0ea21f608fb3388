[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "missionx"
version = "0.1.0"
description = "Mission control workbench: scenario loading, validation, alert rules, track simulation and debrief export"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "mission-planning",
    "simulation",
    "tracks",
    "scenario",
    "alerts",
    "debrief",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
missionx = "missionx.app:main"

[tool.hatch.build.targets.wheel]
packages = ["missionx"]

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
