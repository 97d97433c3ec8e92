[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frsana"
version = "0.1.0"
description = "Data containers, a constant field map and MUSIC calibration steps for FRS fragment-separator analysis"
requires-python = ">=3.10"
keywords = ["nuclear physics", "FRS", "MUSIC", "calibration", "detector", "TPC"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["frsana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
