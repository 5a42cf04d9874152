[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metaset"
version = "0.1.0"
description = "Include/exclude sets and a small processing graph for combining them with logical operators"
requires-python = ">=3.10"
dependencies = []
keywords = ["sets", "complement", "set algebra", "processing graph", "filter"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["metaset"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
