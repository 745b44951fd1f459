[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alumgame"
version = "1.0.0"
description = "A terminal game of matches: take one to three from the last row, and whoever takes the last match loses."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "nim", "matches", "terminal", "printf"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
alumgame = "alumgame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["alumgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
