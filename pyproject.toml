[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "grottequest"
version = "0.1.0"
description = "A text-mode role-playing game of caves, monsters, weapons and a dragon, with saves kept in SQLite."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "text-adventure", "console", "sqlite"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
grottequest = "grottequest.game:main"

[tool.setuptools]
packages = ["grottequest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
