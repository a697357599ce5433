[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "placewords"
version = "0.1.0"
description = "Turn S2 cell ids and latitude/longitude pairs into short memorable word addresses and back."
requires-python = ">=3.10"
dependencies = []
keywords = ["s2", "geocoding", "words", "location", "gis", "lfsr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
placewords = "placewords.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["placewords"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
