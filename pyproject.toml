[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "promethean"
version = "1.0.0"
description = "Retained-mode 2D UI widgets, layouts, window stack, event bus and ECS components"
requires-python = ">=3.10"
dependencies = []
keywords = ["ui", "widgets", "layout", "event-bus", "ecs", "game", "2d"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["promethean"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
