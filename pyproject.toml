[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "orion"
version = "0.1.0"
description = "A toy neural structure: region files of neurons, a structure generator and an interactive console"
requires-python = ">=3.10"
dependencies = []
keywords = ["neurons", "neural", "simulation", "brain", "regions"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
orion = "orion.app:main"
orion-editor = "orion.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["orion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
