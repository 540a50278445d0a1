[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxidris"
version = "0.1.0"
description = "A falling-block puzzle game engine with statistics and survival-analysis utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["tetris", "puzzle", "game-engine", "statistics", "kaplan-meier", "histogram"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oxidris"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
