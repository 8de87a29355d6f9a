[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tpclases"
version = "0.1.0"
description = "Small object-oriented exercises: a 12-hour clock, a course roster, arithmetic operations and bank accounts."
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "oop", "clock", "bank", "course"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tpclases-clock = "tpclases.clock:main"
tpclases-course = "tpclases.course:main"
tpclases-arithmetic = "tpclases.arithmetic:main"
tpclases-bank = "tpclases.bank:main"

[tool.hatch.build.targets.wheel]
packages = ["tpclases"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
