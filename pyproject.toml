[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infixcalc"
version = "0.1.0"
description = "Integer infix expression evaluator using precedence climbing, with small C-style string, buffer and list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "expression", "infix", "precedence-climbing", "parser"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
infixcalc = "infixcalc.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["infixcalc"]

[tool.pytest.ini_options]
addopts = "-ra"
