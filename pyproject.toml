[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sqltree"
version = "0.1.0"
description = "SQL keywords, dialect identifier rules and query AST nodes that render back to SQL text"
requires-python = ">=3.10"
dependencies = []
keywords = ["sql", "ast", "dialect", "keywords", "query"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sqltree"]

[tool.pytest.ini_options]
addopts = "-ra"
