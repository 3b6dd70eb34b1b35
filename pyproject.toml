[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "titlefmt"
version = "0.2.0"
description = "Parser and evaluator for foobar2000-style title formatting scripts"
requires-python = ">=3.10"
dependencies = []
keywords = ["titleformat", "foobar2000", "parser", "metadata", "tags"]
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
    "Topic :: Text Processing",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["titlefmt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
