[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tfcodegen-spec"
version = "0.1.0"
description = "Specification model for provider code generation: types, defaults, validators and plan modifiers with order-insensitive equality."
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "schema", "specification", "plan modifiers", "validators"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tfcodegen_spec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
