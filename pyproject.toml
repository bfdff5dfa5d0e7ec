[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytecord"
version = "0.0.2"
description = "Bounds-checked, alignment-aware reading and building of binary data"
requires-python = ">=3.10"
dependencies = []
keywords = ["bytes", "binary", "parsing", "alignment", "buffer", "serialization"]
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
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["bytecord"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
