[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clikit"
version = "0.1.0"
description = "Building blocks for command-line applications: flag sets, flags, contexts, commands, Markdown fragments and fish completion lines."
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "command-line", "flags", "arguments", "completion", "fish"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["clikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
