[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmlui"
version = "0.1.0"
description = "CSS-style colors, style sheets, selectors, transitions, easing and SVG path parsing for user interfaces"
requires-python = ">=3.10"
dependencies = []
keywords = ["css", "style", "selector", "transition", "easing", "svg", "path", "color", "ui"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xmlui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
