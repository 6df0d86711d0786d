[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chargefield"
version = "0.1.0"
description = "Interactive 2D electric field simulator with draggable point charges and a field sensor"
requires-python = ">=3.10"
keywords = ["electric field", "electrostatics", "physics", "simulation", "vector field", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Education",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chargefield = "chargefield.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chargefield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
