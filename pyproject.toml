[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "emberkit"
version = "0.1.0"
description = "Small toolkit of string, path, byte-buffer, file and command-line argument helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "paths", "arguments", "cli", "files", "bytes", "utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Utilities",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["emberkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
