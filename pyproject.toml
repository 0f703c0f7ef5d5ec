[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ndraster"
version = "0.1.0"
description = "N-dimensional rasters, boxes, interpolation and affine transforms"
requires-python = ">=3.10"
keywords = ["raster", "image", "n-dimensional", "interpolation", "affine", "resampling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ndraster"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
