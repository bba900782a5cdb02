[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smilegame"
version = "0.1.0"
description = "A tiny entity-system platformer in which a smiley face falls, walks and jumps."
requires-python = ">=3.10"
keywords = ["game", "pygame", "platformer", "entity-system"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
smilegame = "smilegame.game:main"

[tool.hatch.build.targets.wheel]
packages = ["smilegame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
