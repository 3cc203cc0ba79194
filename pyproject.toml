[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bestiary"
version = "0.1.0"
description = "Mythical creature records in a chained hash table, indexed by a binary search tree of IDs"
requires-python = ">=3.10"
dependencies = []
keywords = ["mythical creatures", "binary search tree", "hash table", "separate chaining", "data structures"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bestiary"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
