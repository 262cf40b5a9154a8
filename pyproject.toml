[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primefact"
version = "0.1.0"
description = "Concurrent prime factorization of integers with configurable worker pools"
requires-python = ">=3.10"
dependencies = []
keywords = ["prime", "factorization", "concurrency", "threads", "workers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
primefact = "primefact.app:main"

[tool.hatch.build.targets.wheel]
packages = ["primefact"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
