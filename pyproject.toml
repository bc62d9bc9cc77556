[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cursor_binary_parser"
version = "0.2.0"
description = "A cursor over binary data with a position stack and little-endian primitive parsing."
requires-python = ">=3.10"
dependencies = []
keywords = ["cursor", "parsing", "binary", "bytes", "struct"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cursor_binary_parser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
