[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surviva"
version = "0.1.0"
description = "A small top-down survival game: walk around, chop trees with an axe and pick up what drops."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "survival", "top-down", "pygame", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
surviva = "surviva.app:main"

[tool.hatch.build.targets.wheel]
packages = ["surviva"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
