[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cvrpsolve"
version = "0.1.0"
description = "Capacitated vehicle routing: VRPLIB instance reader, Clarke & Wright savings and local search"
requires-python = ">=3.10"
dependencies = []
keywords = ["cvrp", "vehicle routing", "vrplib", "clarke-wright", "heuristics", "local search"]
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
cvrpsolve = "cvrpsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cvrpsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
