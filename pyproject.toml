[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infinitensor"
version = "0.1.0"
description = "Element data types, operator types, a kernel registry and broadcasting and half-precision helpers for a tensor graph runtime"
requires-python = ">=3.10"
dependencies = []
keywords = ["tensor", "dtype", "broadcasting", "float16", "kernel registry"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["infinitensor"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
