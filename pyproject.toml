[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mtel"
version = "0.0.1"
description = "A tiny stack-based token language with typed stack slots and pluggable commands"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "stack machine", "bytecode", "scripting"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mtel = "mtel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mtel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
