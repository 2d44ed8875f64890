[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "repertoire"
version = "0.1.0"
description = "Study and practise chess opening repertoires from the terminal"
requires-python = ">=3.10"
keywords = ["chess", "openings", "repertoire", "pgn", "study"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
repertoire = "repertoire.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["repertoire"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
