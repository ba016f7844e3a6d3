[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "turbograph"
version = "1.0.2"
description = "An in-memory, Turbo C style 8-bit graphics canvas with lines, arcs, ellipses, polygons and bitmap-strip text, plus small console exercises."
requires-python = ">=3.10"
dependencies = []
keywords = ["graphics", "raster", "bresenham", "polygon", "scanline", "turbo-c", "bgi", "seven-segment"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
turbograph-exercises = "turbograph.exercises:main"

[tool.setuptools.packages.find]
include = ["turbograph*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
