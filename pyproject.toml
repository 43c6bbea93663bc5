[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadeterm"
version = "0.1.0"
description = "A terminal arcade with Snake, Othello, Tic Tac Toe and a Sudoku solver, with per-user stats kept in MySQL"
requires-python = ">=3.10"
keywords = ["arcade", "terminal", "snake", "othello", "tictactoe", "sudoku", "mysql"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pymysql",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
arcadeterm = "arcadeterm.main:main"

[tool.hatch.build.targets.wheel]
packages = ["arcadeterm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
