[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "engabra"
version = "0.2.1"
description = "Practical geometric algebra computation in three-dimensional space for engineering"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometric algebra", "clifford algebra", "spinor", "multivector", "rotation", "engineering"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["engabra"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
