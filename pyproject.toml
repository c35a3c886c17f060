[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "personajes"
version = "0.1.0"
description = "Role-playing characters: a weapon-carrying base character, mages, and sorcerer, warlock, conjurer and necromancer specialisations."
requires-python = ">=3.10"
dependencies = []
keywords = ["rpg", "role-playing", "characters", "magic", "game"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Natural Language :: Spanish",
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

[tool.hatch.build.targets.wheel]
packages = ["personajes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
