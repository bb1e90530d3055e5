[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zeekit"
version = "0.2.0"
description = "Building blocks of a terminal text editor: CSS-like highlighting rules, file modes, window layouts, settings and text helpers"
requires-python = ">=3.11"
keywords = ["editor", "syntax-highlighting", "selectors", "window-layout", "graphemes"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Editors",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "platformdirs",
    "regex",
    "tomli-w",
    "wcwidth",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zeekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
