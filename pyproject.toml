[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "listgame"
version = "0.1.0"
description = "Permutations, work functions, pairwise game graphs and MRU move rules for studying online list update on small lists"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "list update",
    "online algorithms",
    "competitive analysis",
    "work function",
    "permutahedron",
    "bellman-ford",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
listgame-reachable = "listgame.reachable:main"
listgame-pairwise-game = "listgame.pairwise_game:main"
listgame-lastthree = "listgame.lastthree:main"

[tool.hatch.build.targets.wheel]
packages = ["listgame"]

[tool.pytest.ini_options]
addopts = "-ra"
