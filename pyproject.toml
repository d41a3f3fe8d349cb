[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazegame"
version = "0.1.0"
description = "A small terminal maze game with mines, first-aid kits and teleports, plus a sentence-processing text tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "terminal", "puzzle", "text-processing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mazegame = "mazegame.game:main"
mazegame-sentences = "mazegame.sentences:main"

[tool.hatch.build.targets.wheel]
packages = ["mazegame"]

[tool.pytest.ini_options]
addopts = "-ra"
