[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cncgrbl"
version = "1.0.0"
description = "A small G-code interpreter and stepper motion core for three-axis CNC machines"
requires-python = ">=3.10"
dependencies = []
keywords = ["cnc", "gcode", "g-code", "stepper", "motion", "planner", "grbl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Manufacturing",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cncgrbl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
