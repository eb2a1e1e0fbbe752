[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "bloodsugar"
version = "0.1.0"
description = "Interactive averages of blood sugar readings kept in a CSV file"
requires-python = ">=3.10"
dependencies = []
keywords = ["blood sugar", "glucose", "diabetes", "csv", "average"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bloodsugar = "bloodsugar.cli:main"

[tool.setuptools.packages.find]
include = ["bloodsugar*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
