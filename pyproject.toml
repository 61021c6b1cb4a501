[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphroutes"
version = "0.1.0"
description = "Bellman-Ford shortest paths and brute-force travelling-salesman tours over small weighted edge lists"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graph",
    "bellman-ford",
    "shortest-path",
    "travelling-salesman",
    "tsp",
    "edge-list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
graphroutes = "graphroutes.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["graphroutes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
