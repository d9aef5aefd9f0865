[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "apcalc"
version = "0.1.0"
description = "Arbitrary-precision integer calculator working digit by digit"
requires-python = ">=3.10"
dependencies = []
keywords = ["arbitrary precision", "bignum", "calculator", "arithmetic"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
apcalc = "apcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["apcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
