[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bisectkit"
version = "0.1.0"
description = "Binary search routines for sorted and rotated sorted sequences"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary search",
    "bisect",
    "lower bound",
    "upper bound",
    "floor",
    "ceiling",
    "rotated array",
    "algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
bisectkit = "bisectkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bisectkit"]

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
strict = true
