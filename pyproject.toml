[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "randomgeojson"
version = "0.1.4"
description = "Generate random GeoJSON data"
requires-python = ">=3.10"
keywords = ["geojson", "random", "gis", "test-data"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
    "Topic :: Software Development :: Testing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
random-geojson = "randomgeojson.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["randomgeojson"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
