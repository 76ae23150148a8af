[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonwalk"
version = "0.1.0"
description = "A small third-person dungeon walker with a sprite-animated player and a title menu"
requires-python = ">=3.10"
keywords = ["game", "dungeon", "3d", "pyglet", "billboard", "sprite"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = [
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeonwalk = "dungeonwalk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeonwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
