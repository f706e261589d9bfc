[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskboard"
version = "0.1.0"
description = "A small to-do tracker with a command line, JSON-file and database-backed web APIs, and a few companion demo programs"
requires-python = ">=3.10"
keywords = ["todo", "tasks", "flask", "sqlalchemy", "rest", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content",
    "Topic :: Office/Business :: Scheduling",
]
dependencies = [
    "flask",
    "sqlalchemy",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
taskboard = "taskboard.cli:main"
taskboard-api = "taskboard.api:main"
taskboard-db-api = "taskboard.db_api:main"
taskboard-greeting = "taskboard.greeting:main"
taskboard-booking = "taskboard.booking:main"
taskboard-dialog = "taskboard.dialog:main"
taskboard-maze = "taskboard.maze:main"

[tool.hatch.build.targets.wheel]
packages = ["taskboard"]

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
ignore_missing_imports = true
