[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphflow"
version = "0.1.0"
description = "Two-dimensional smoothed particle hydrodynamics solver, with grid-node, tridiagonal, colour-scale and camera-controller helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sph", "fluid", "cfd", "particles", "simulation", "tridiagonal", "thomas-algorithm"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sphflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
