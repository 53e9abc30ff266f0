[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edhighway"
version = "0.14.0"
description = "Elite Dangerous trip helpers: closed-route ordering of star systems, star names from OCR text, binary-image text helpers, OCR language data discovery and persistent settings."
requires-python = ">=3.10"
dependencies = []
keywords = ["elite-dangerous", "route", "travelling-salesman", "ocr", "settings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edhighway"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
