[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minesweeper"
version = "0.1.0"
description = "Minesweeper for the terminal, with a curses interface and a plain-text board renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "game", "terminal", "curses", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
minesweeper = "minesweeper.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minesweeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
