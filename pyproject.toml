[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skipfields"
version = "0.1.0"
description = "Skipfield structures for tracking skipped and active slots: boolean, bitmask, low-complexity jump-counting and thread-safe variants"
requires-python = ">=3.10"
dependencies = []
keywords = ["skipfield", "bitmask", "jump-counting", "data-structures", "colony"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
skipfields-bool-demo = "skipfields.boolean:main"
skipfields-seq-demo = "skipfields.seq:main"

[tool.hatch.build.targets.wheel]
packages = ["skipfields"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
