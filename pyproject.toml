[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "frontmesh"
version = "0.1.0"
description = "Advancing-front triangulation of 2D point sets, with a QuickHull convex hull and an interactive viewer"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "matplotlib",
]
keywords = ["triangulation", "advancing front", "quickhull", "convex hull", "mesh", "geometry"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
frontmesh = "frontmesh.app:main"

[tool.hatch.build.targets.wheel]
packages = ["frontmesh"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
