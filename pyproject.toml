[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marblesoccer"
version = "0.1.0"
description = "A marble soccer physics simulation with random shots, a baseline agent and an optional pygame view"
requires-python = ">=3.10"
keywords = ["simulation", "physics", "soccer", "marbles", "collisions", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
marblesoccer = "marblesoccer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["marblesoccer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
