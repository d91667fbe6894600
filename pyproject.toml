[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oak"
version = "1.0.0"
description = "An Acorn Archimedes A3000 emulator with an ARM2 CPU core"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["emulator", "archimedes", "a3000", "arm2", "acorn"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oak = "oak.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oak"]

[tool.pytest.ini_options]
addopts = "-ra"
