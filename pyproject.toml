[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "strawberry"
version = "0.1.0"
description = "Core utilities: vectors, matrices, periodic and clamped numbers, byte buffers, Base64, logging, timing, messaging and synchronisation helpers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "math",
    "vector",
    "matrix",
    "base64",
    "buffer",
    "logging",
    "timing",
    "mutex",
    "broadcast",
]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["strawberry"]

[tool.pytest.ini_options]
addopts = "-ra"
