[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "predator"
version = "0.1.0"
description = "Data quality models: metrics, table schemas, SQL query builders, audit reports, result messages and SQLite-backed stores"
requires-python = ">=3.10"
dependencies = []
keywords = ["data quality", "profiling", "audit", "metrics", "sql", "bigquery"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["predator"]

[tool.pytest.ini_options]
addopts = "-ra"
