[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortcraft"
version = "0.1.0"
description = "Classic sorting algorithms with pluggable comparators, linked-list strand sort and simple benchmarking"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "algorithms",
    "quicksort",
    "mergesort",
    "radix",
    "counting-sort",
    "benchmark",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
sortcraft = "sortcraft.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortcraft"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
