[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edline"
version = "0.1.0"
description = "Line-editing building blocks: edit commands, emacs and vi key parsing, keybindings, highlighters and hint helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["line editor", "readline", "keybindings", "vi", "emacs", "terminal"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["edline"]

[tool.pytest.ini_options]
addopts = "-ra"
