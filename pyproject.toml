[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritewalk"
version = "0.1.0"
description = "Walk an animated spritesheet character around a window with the keyboard"
requires-python = ">=3.10"
keywords = ["sprite", "spritesheet", "animation", "pygame", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
spritewalk = "spritewalk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["spritewalk"]

[tool.pytest.ini_options]
addopts = "-ra"
