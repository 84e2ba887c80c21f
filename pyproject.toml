[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordgrid"
version = "0.1.0"
description = "Boggle-style word search on random letter grids, with a base-36 string hash and an open-addressing hash table"
requires-python = ">=3.10"
dependencies = []
keywords = ["boggle", "word search", "puzzle", "hash table", "double hashing", "mersenne twister"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordgrid-boggle = "wordgrid.boggle:main"
wordgrid-hash = "wordgrid.hashing:main"
wordgrid-table-demo = "wordgrid.hashtable:main"

[tool.hatch.build.targets.wheel]
packages = ["wordgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
