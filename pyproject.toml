[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evosim"
version = "0.1.0"
description = "Evolution simulation of animals with neural-network brains trained by a genetic algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["genetic-algorithm", "neural-network", "evolution", "simulation", "artificial-life"]
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
    "Topic :: Scientific/Engineering :: Artificial Life",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["evosim"]

[tool.pytest.ini_options]
addopts = "-ra"
