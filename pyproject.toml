[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taskmanager"
version = "0.1.0"
description = "Task model, validation, in-memory storage and task service logic"
requires-python = ">=3.10"
keywords = ["tasks", "todo", "validation", "repository"]
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
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["taskmanager"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
