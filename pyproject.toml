[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algoclase"
version = "0.1.0"
description = "Classroom algorithms: d-ary heap, binary-search exercises, graph cycles and small contest problems"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "data structures", "heap", "binary search", "graph", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algoclase-party = "algoclase.party:main"
algoclase-cycles = "algoclase.graph:main"
algoclase-estimate = "algoclase.estimation:main"

[tool.hatch.build.targets.wheel]
packages = ["algoclase"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
