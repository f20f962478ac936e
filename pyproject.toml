[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "routekit"
version = "0.1.0"
description = "Radix-tree URL routing, response writing, access-log formatting and response renderers."
requires-python = ">=3.10"
keywords = ["http", "router", "radix-tree", "render", "json", "logging", "templates"]
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
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "jinja2",
    "pyyaml",
    "tomli-w",
    "msgpack",
]

[project.optional-dependencies]
test = [
    "pytest",
    "protobuf",
]

[tool.hatch.build.targets.wheel]
packages = ["routekit"]

[tool.hatch.build.targets.sdist]
include = ["routekit", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
