[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "escalona"
version = "0.1.0"
description = "Check transaction schedules for conflict serializability and view equivalence"
requires-python = ">=3.10"
dependencies = []
keywords = ["database", "transactions", "schedule", "serializability", "concurrency control"]
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
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
escalona = "escalona.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["escalona"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
