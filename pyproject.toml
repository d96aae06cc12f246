[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hakohir"
version = "0.1.0"
description = "Identifiers, HIR data model, body scope resolution and diagnostics for the Hako language compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "hir", "intermediate-representation", "scope", "diagnostics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hakohir"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
