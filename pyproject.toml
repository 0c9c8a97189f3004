[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "refprism"
version = "1.0.0"
description = "Game logic for RefPrism, an arcade game where a crystal reflects and refracts a laser to defend its cannon"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "laser", "reflection", "refraction", "wavefront-obj", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["refprism"]

[tool.hatch.build.targets.sdist]
include = ["refprism", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
