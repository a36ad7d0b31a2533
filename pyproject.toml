[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stringplus"
version = "0.1.0"
description = "C-style string routines and printf/scanf-style formatting and parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["string", "sprintf", "sscanf", "printf", "scanf", "strtok"]
classifiers = [
    "Topic :: Software Development :: Libraries",
    "Topic :: Text Processing :: General",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stringplus"]

[tool.pytest.ini_options]
addopts = "-ra"
