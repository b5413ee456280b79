[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "speyl"
version = "0.1.0"
description = "String similarity measures and word suggestions: Jaro, Levenshtein, Damerau-Levenshtein and Indel."
requires-python = ">=3.10"
dependencies = []
keywords = ["spelling", "similarity", "levenshtein", "jaro", "damerau", "indel", "fuzzy"]
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
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["speyl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
