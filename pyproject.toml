[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "iisreftrace"
version = "0.1.0"
description = "Reference-count trace logs, circular memory logs and debug print channels for diagnosing long-running services"
requires-python = ">=3.10"
dependencies = []
keywords = ["debugging", "reference counting", "trace log", "ring buffer", "diagnostics"]
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
    "Topic :: Software Development :: Debuggers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["iisreftrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
