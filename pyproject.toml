[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ooxml"
version = "0.1.0"
description = "Building blocks for reading and writing Office Open XML packages"
requires-python = ">=3.10"
dependencies = []
keywords = ["ooxml", "office", "xlsx", "docx", "pptx", "zip", "xml", "relationships"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: File Formats",
    "Topic :: Office/Business :: Office Suites",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ooxml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
