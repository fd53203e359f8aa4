[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "searchcore"
version = "0.1.0"
description = "Building blocks for a typo-tolerant search engine: query automatons, synonym-aware query enhancement and ranking criteria"
requires-python = ">=3.10"
dependencies = [
    "unidecode",
]
keywords = ["search", "ranking", "levenshtein", "typo-tolerance", "query", "indexing"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Indexing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["searchcore"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
