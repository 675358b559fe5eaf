[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphopt"
version = "0.1.0"
description = "Graph algorithms and LP/MILP models: BFS, topological sort, diameter bounds, diet LP, network flow and job assignment."
requires-python = ">=3.10"
keywords = [
    "graph",
    "bfs",
    "diameter",
    "topological-sort",
    "random-graphs",
    "linear-programming",
    "milp",
    "network-flow",
    "assignment",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
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
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["graphopt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
