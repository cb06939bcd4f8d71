[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tadkit"
version = "0.1.0"
description = "Classic abstract data types (lists, stacks, AVL trees, hash tables) with exercises and small record-keeping tools built on them"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "linked-list",
    "stack",
    "avl-tree",
    "hash-table",
    "recursion",
    "exercises",
]
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
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tadkit-vaccination = "tadkit.vaccination:main"
tadkit-students = "tadkit.students:main"

[tool.hatch.build.targets.wheel]
packages = ["tadkit"]

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
warn_redundant_casts = true
