[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pgnboard"
version = "0.1.0"
description = "Bitboard chess primitives and legal move generation, with ISO 8859-1 text handling"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "move generation", "legal moves", "iso-8859-1"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pgnboard"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
