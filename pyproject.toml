[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "meshui"
version = "0.1.0"
description = "Input drivers, display profiles and utilities for a mesh radio device user interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["mesh", "lora", "display", "input", "embedded", "log rotation"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["meshui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
