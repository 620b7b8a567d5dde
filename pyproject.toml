[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nekostd"
version = "0.1.0"
description = "Runtime primitives: wrapping 32-bit integers, math, dates, strings, digests, serialization, files, processes, threads and a seeded random generator"
requires-python = ">=3.10"
dependencies = []
keywords = ["int32", "serialization", "md5", "sprintf", "threads", "random", "dates"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["nekostd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
