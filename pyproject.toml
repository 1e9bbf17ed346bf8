[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkedlists"
version = "0.1.0"
description = "Singly and doubly linked lists and a fixed-size bit vector"
requires-python = ">=3.10"
dependencies = []
keywords = ["linked list", "doubly linked list", "singly linked list", "bit vector", "data structures"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["linkedlists"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
