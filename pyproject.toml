[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ranv"
version = "0.1.0"
description = "A small layered game engine core with events, layers and a pygame-backed window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game engine", "events", "layers", "pygame"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ranv-sandbox = "ranv.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["ranv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
