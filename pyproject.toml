[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "actionbind"
version = "0.1.0"
description = "Map game actions to button, axis, dual-axis and triple-axis inputs"
requires-python = ">=3.10"
keywords = ["input", "bindings", "actions", "keymap", "games"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Games/Entertainment",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["actionbind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
