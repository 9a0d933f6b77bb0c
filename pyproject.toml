[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quasidef"
version = "0.1.0"
description = "LDL^T factorisation of sparse quasidefinite matrices, with conic problem data types"
requires-python = ">=3.10"
dependencies = []
keywords = ["sparse", "ldl", "factorisation", "quasidefinite", "linear-algebra", "conic", "optimization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quasidef"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
