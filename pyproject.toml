[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazeweaver"
version = "0.1.0"
description = "Generate, load, render and solve rectangular mazes in the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "eller", "bfs", "curses", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazeweaver = "mazeweaver.app:main"

[tool.hatch.build.targets.wheel]
packages = ["mazeweaver"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
