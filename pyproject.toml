[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parceltrack"
version = "0.1.0"
description = "A small parcel tracker backed by SQLite: register parcels, advance their status, change addresses and delete them."
requires-python = ">=3.10"
dependencies = []
keywords = ["parcel", "tracking", "sqlite", "delivery"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
parceltrack = "parceltrack.service:main"

[tool.hatch.build.targets.wheel]
packages = ["parceltrack"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
