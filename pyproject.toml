[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicebox"
version = "0.1.0"
description = "Small number and text exercises plus terminal games: hangman, a room adventure, snake and tic-tac-toe."
requires-python = ">=3.10"
dependencies = []
keywords = ["games", "hangman", "snake", "tic-tac-toe", "exercises", "text-adventure"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicebox-hangman = "practicebox.hangman:main"
practicebox-adventure = "practicebox.adventure:main"
practicebox-snake = "practicebox.snake:main"
practicebox-tictactoe = "practicebox.tictactoe:main"

[tool.hatch.build.targets.wheel]
packages = ["practicebox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
