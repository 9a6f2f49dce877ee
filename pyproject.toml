[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifecube"
version = "0.1.0"
description = "Conway's Game of Life on a wrapping grid, with a free-look camera, input handling and cube meshes"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["game-of-life", "cellular-automaton", "camera", "mesh", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
lifecube = "lifecube.life:main"

[tool.hatch.build.targets.wheel]
packages = ["lifecube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
