[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "valence"
version = "0.1.0"
description = "Building blocks for Minecraft servers: resource identifiers, dimensions, chunk positions, paletted containers and entities."
requires-python = ">=3.10"
keywords = ["minecraft", "server", "game", "protocol", "entities", "chunks"]
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
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[tool.hatch.build.targets.wheel]
packages = ["valence"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
