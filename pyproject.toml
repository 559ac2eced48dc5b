[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dslib"
version = "0.1.0"
description = "Textbook linked lists and strings: singly, headed, circular and doubly linked lists, bounded and linked strings, naive and KMP matching helpers."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "linked list", "circular list", "doubly linked list", "string", "kmp"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["dslib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
