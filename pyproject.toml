[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "choicekit"
version = "0.1.0"
description = "Tagged unions, records, interfaces and pattern matching as plain Python values"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sum types",
    "tagged unions",
    "pattern matching",
    "algebraic data types",
    "records",
    "interfaces",
    "vtables",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
choicekit-demo = "choicekit.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["choicekit"]

[tool.pytest.ini_options]
addopts = "-ra"
