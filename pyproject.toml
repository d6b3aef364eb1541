[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "echiquier"
version = "0.1.0"
description = "Tic-tac-toe and chess in the terminal against a minimax / alpha-beta computer player"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "tic-tac-toe", "minimax", "alpha-beta", "game", "ai", "terminal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
echiquier = "echiquier.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["echiquier"]

[tool.pytest.ini_options]
addopts = "-ra"
