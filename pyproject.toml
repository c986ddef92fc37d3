[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polypair"
version = "0.1.0"
description = "Two dense-coefficient polynomial classes and a text report of their arithmetic over a fixed set of polynomial pairs"
requires-python = ">=3.10"
keywords = ["polynomial", "calculus", "newton", "roots", "algebra"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
polypair = "polypair.report:main"

[tool.hatch.build.targets.wheel]
packages = ["polypair"]

[tool.pytest.ini_options]
addopts = "-ra"
