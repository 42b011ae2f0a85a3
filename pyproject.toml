[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marionette"
version = "0.1.0"
description = "Building blocks for a small declarative configuration-management language: a recipe lexer, a variable environment and file helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["configuration-management", "automation", "lexer", "provisioning", "sysadmin"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marionette"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
