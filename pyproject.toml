[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromastream"
version = "0.1.0"
description = "Colored and styled terminal output through chainable stream manipulators"
requires-python = ">=3.10"
dependencies = []
keywords = ["terminal", "color", "ansi", "escape-sequences", "console", "tty"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chromastream-demo = "chromastream.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["chromastream"]

[tool.pytest.ini_options]
addopts = "-ra"
