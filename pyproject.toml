[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wolfmaze"
version = "1.0.0"
description = "A tile-based escape game: collect every key, avoid the guards and reach the exit."
requires-python = ">=3.10"
keywords = ["game", "maze", "tiles", "pygame", "xpm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
wolfmaze = "wolfmaze.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wolfmaze"]

[tool.pytest.ini_options]
addopts = "-ra"
