[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imwlang"
version = "0.1.0"
description = "Scanner, parser and symbol table for the small Imw teaching language"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "scanner", "lexer", "parser", "symbol-table", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Software Development :: Compilers",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
imwlang = "imwlang.compiler:main"
imwlang-quick = "imwlang.quick_scan:main"

[tool.hatch.build.targets.wheel]
packages = ["imwlang"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
