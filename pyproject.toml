[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dscollections"
version = "0.1.0"
description = "Dynamic arrays, doubly linked lists, radix maps and the sorting algorithms that go with them"
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "dynamic array", "radix sort", "sorting", "binary search"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dscollections"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
