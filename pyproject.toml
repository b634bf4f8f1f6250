[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "alglab"
version = "0.1.0"
description = "Classic algorithms and data structures, each with a small command-line front end."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "merge sort",
    "dynamic programming",
    "backtracking",
    "trie",
    "dijkstra",
    "floyd-warshall",
    "knapsack",
    "graph coloring",
    "kmp",
    "max flow",
    "linked list",
    "binary search tree",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
alglab-sort = "alglab.sorting:main"
alglab-sums = "alglab.sums:main"
alglab-coins = "alglab.coins:main"
alglab-maze = "alglab.maze:main"
alglab-hash = "alglab.hashstring:main"
alglab-trie = "alglab.trie:main"
alglab-knapsack = "alglab.knapsack:main"
alglab-paths = "alglab.shortest_paths:main"
alglab-coloring = "alglab.coloring:main"
alglab-malware = "alglab.malware:main"
alglab-networks = "alglab.networks:main"
alglab-logs = "alglab.logs:main"
alglab-linkedlist = "alglab.linkedlist:main"
alglab-bst = "alglab.bst:main"
alglab-iplog = "alglab.iplog:main"

[tool.hatch.build.targets.wheel]
packages = ["alglab"]

[tool.hatch.build.targets.sdist]
include = ["alglab", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
