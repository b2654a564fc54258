[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numethods"
version = "0.1.0"
description = "Small numerical methods toolkit: linear systems, QR, iterative solvers, root finding and Newton interpolation"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "numerical-methods",
    "linear-algebra",
    "gaussian-elimination",
    "qr-decomposition",
    "conjugate-gradient",
    "root-finding",
    "interpolation",
    "divided-differences",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
numethods-newton = "numethods.newton:main"

[tool.hatch.build.targets.wheel]
packages = ["numethods"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
