[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticketsort"
version = "0.1.0"
description = "Classic sorting algorithms, a linked list, an AVL tree, red-black tree nodes and small event-ticket registries"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "bubble-sort",
    "selection-sort",
    "insertion-sort",
    "quick-sort",
    "merge-sort",
    "shell-sort",
    "linked-list",
    "avl-tree",
    "red-black-tree",
    "tickets",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
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
test = ["pytest"]

[project.scripts]
ticketsort-sort = "ticketsort.sorting:main"
ticketsort-avl = "ticketsort.avl:main"
ticketsort-events = "ticketsort.events:main"
ticketsort-box-office = "ticketsort.box_office:main"

[tool.hatch.build.targets.wheel]
packages = ["ticketsort"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
