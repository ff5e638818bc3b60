[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latest-cache"
version = "1.0.0"
description = "An iterable adaptor that computes each element of a sequence once and caches the latest one"
requires-python = ">=3.10"
dependencies = []
keywords = ["iterator", "iterable", "cache", "adaptor", "lazy", "view"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["latest_cache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
