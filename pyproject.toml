[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "evdash"
version = "1.0.0"
description = "A simulated electric-vehicle dashboard with battery, speed and drive-mode models backed by a CSV database"
requires-python = ">=3.10"
dependencies = []
keywords = ["electric vehicle", "dashboard", "simulation", "battery", "observer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
evdash = "evdash.app:main"

[tool.hatch.build.targets.wheel]
packages = ["evdash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
