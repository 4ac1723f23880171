[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libabyss"
version = "0.1.0"
description = "Readers for classic action-RPG game data formats: palettes, sprites, tiles, maps and string tables"
requires-python = ">=3.10"
keywords = ["game", "data", "dc6", "dt1", "ds1", "palette", "tbl", "ini", "png"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pillow",
]

[tool.hatch.build.targets.wheel]
packages = ["libabyss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
