[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qgrammar"
version = "0.1.0"
description = "Tools for reading, transforming and analysing BNF/EBNF grammars, with a cQASM data model and semantic checker"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "grammar",
    "bnf",
    "ebnf",
    "parsing",
    "first-set",
    "follow-set",
    "qasm",
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gcopy = "qgrammar.cli:copy_main"
gdeebnf = "qgrammar.cli:deebnf_main"
gdeempty = "qgrammar.cli:deempty_main"
gsample = "qgrammar.cli:sample_main"
gsqueeze = "qgrammar.cli:squeeze_main"
gstartfollow = "qgrammar.cli:startfollow_main"
gstats = "qgrammar.cli:stats_main"

[tool.hatch.build.targets.wheel]
packages = ["qgrammar"]

[tool.hatch.build.targets.sdist]
include = ["qgrammar", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
