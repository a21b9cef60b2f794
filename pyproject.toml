[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "esqb"
version = "0.2.0"
description = "Fluent builder for Elasticsearch query DSL request bodies, with no runtime dependencies."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "elasticsearch",
    "query",
    "query-builder",
    "dsl",
    "search",
    "aggregations",
]
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
    "Topic :: Database :: Front-Ends",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
esqb-example = "esqb.example:main"

[tool.hatch.build.targets.wheel]
packages = ["esqb"]

[tool.hatch.build.targets.sdist]
include = ["esqb", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
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
