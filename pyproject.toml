[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubworld"
version = "0.1.0"
description = "Tile map, reachability, placement and game-state logic for a small first-person maze game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "maze", "raycaster", "tile-map", "bfs"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: First Person Shooters",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cubworld"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
