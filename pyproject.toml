[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fssvb"
version = "2.0.0"
description = "Length-prefixed variable blocked (VB) record files, EBCDIC code pages and bounded strings"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "vb",
    "variable-blocked",
    "records",
    "rdw",
    "bdw",
    "ebcdic",
    "mainframe",
    "qsam",
    "bounded-string",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vbcat = "fssvb.vbcat:main"
vbconv = "fssvb.vbconv:main"
vbcopy = "fssvb.vbcopy:main"
vbinfo = "fssvb.vbinfo:main"
vbrace = "fssvb.race:main"

[tool.hatch.build.targets.wheel]
packages = ["fssvb"]

[tool.hatch.build.targets.sdist]
include = ["fssvb", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
