[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "berlint"
version = "0.1.0"
description = "Validator for .ber tile maps: shape, tiles, components and walls"
requires-python = ">=3.10"
dependencies = []
keywords = ["map", "validator", "ber", "tile", "game", "lint"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
berlint = "berlint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["berlint"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
