[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codeprimer"
version = "0.1.0"
description = "Small, runnable lessons on core programming ideas: types, control flow, functions, data classes, concurrency, errors and a testable calculator."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "tutorial", "examples", "lessons", "calculator", "concurrency"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codeprimer-basics = "codeprimer.basics:main"
codeprimer-control-flow = "codeprimer.control_flow:main"
codeprimer-functions = "codeprimer.functions:main"
codeprimer-shapes = "codeprimer.shapes:main"
codeprimer-concurrency = "codeprimer.concurrency:main"
codeprimer-errors = "codeprimer.error_handling:main"

[tool.hatch.build.targets.wheel]
packages = ["codeprimer"]

[tool.hatch.build.targets.sdist]
include = ["codeprimer", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
files = ["codeprimer"]
warn_unused_ignores = true
