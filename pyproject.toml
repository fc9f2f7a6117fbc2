[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polycalc"
version = "0.1.0"
description = "Parse, simplify, multiply and differentiate multivariate polynomials written as text"
requires-python = ">=3.10"
dependencies = []
keywords = ["polynomial", "algebra", "calculus", "derivative", "simplify"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polycalc = "polycalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["polycalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
