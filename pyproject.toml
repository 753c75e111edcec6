[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rested"
version = "0.1.0"
description = "An interactive command-line REST client that keeps requests in named collections"
requires-python = ">=3.10"
dependencies = []
keywords = ["rest", "http", "cli", "api", "client", "interactive"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rested = "rested.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rested"]

[tool.pytest.ini_options]
addopts = "-ra"
