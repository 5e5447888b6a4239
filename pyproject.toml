[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libdesk"
version = "0.1.0"
description = "A small lending-library desk: books, members, loans, due dates and overdue fines."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "lending", "books", "loans", "fines", "circulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
libdesk = "libdesk.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["libdesk"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
