[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworkshop"
version = "0.1.0"
description = "Console workshops on stacks, a two-queue service simulation, search structures and minimum graph cuts"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "stack",
    "queue",
    "simulation",
    "binary search tree",
    "hash table",
    "graph cut",
    "graphviz",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
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
dsworkshop-stacks = "dsworkshop.stacks.cli:main"
dsworkshop-queues = "dsworkshop.queues.cli:main"
dsworkshop-lookup = "dsworkshop.lookup.cli:main"
dsworkshop-graphcut = "dsworkshop.graphcut.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dsworkshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
