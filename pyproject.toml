[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibank"
version = "0.1.0"
description = "A small interactive bank ledger of people and accounts kept in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["bank", "accounts", "ledger", "sqlite", "shell"]
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
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minibank = "minibank.shell:main"

[tool.hatch.build.targets.wheel]
packages = ["minibank"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
