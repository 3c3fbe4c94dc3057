[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minic_ir"
version = "1.0.1"
description = "Linear intermediate representation, symbol table and driver option parsing for a small C-subset compiler"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "intermediate representation", "ir", "symbol table", "def-use"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minic_ir"]

[tool.hatch.build.targets.sdist]
include = ["minic_ir", "tests"]

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
