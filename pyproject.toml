[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msgboard"
version = "0.1.0"
description = "A sparse two-dimensional text board for posting and reading messages horizontally or vertically."
requires-python = ">=3.10"
keywords = ["board", "text", "message", "grid", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: General",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
msgboard = "msgboard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["msgboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
