[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taxor"
version = "0.2.0"
description = "Taxonomic profiling building blocks: syncmer sketching, k-mer error models, match thresholds, xor filters and reference genome handling."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "metagenomics",
    "taxonomic profiling",
    "syncmers",
    "k-mers",
    "xor filter",
    "fracminhash",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["taxor"]

[tool.hatch.build.targets.sdist]
include = [
    "taxor",
    "tests",
    "README.md",
    "pyproject.toml",
]

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
warn_redundant_casts = true
