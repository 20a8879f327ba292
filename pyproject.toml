[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flipcards"
version = "0.1.0"
description = "A standard 52-card deck of playing cards, kept in a linked list, with shuffling and printing."
requires-python = ">=3.10"
dependencies = []
keywords = ["cards", "playing-cards", "deck", "shuffle", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flipcards = "flipcards.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["flipcards"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
