[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rasterdraw"
version = "0.1.0"
description = "Raster drawing primitives: colour-interpolated lines, midpoint circles and cubic Bezier curves, with a small interactive viewer"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "graphics",
    "rasterization",
    "bresenham",
    "midpoint circle",
    "bezier",
    "line drawing",
    "color interpolation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
rasterdraw = "rasterdraw.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rasterdraw"]

[tool.pytest.ini_options]
addopts = "-ra"
