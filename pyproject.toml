[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lazyent"
version = "0.1.0"
description = "Annotation options for entity schema fields that steer generation of business structs and protobuf messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["code generation", "protobuf", "schema", "annotations", "validation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
packages = ["lazyent"]

[tool.pytest.ini_options]
addopts = "-ra"
