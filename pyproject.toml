[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "batalla"
version = "0.1.0"
description = "Characters, weapons and magic items for a small turn-based battle game played in the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "rpg", "battle", "terminal", "characters", "weapons"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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

[project.scripts]
batalla-demo = "batalla.demo:main"
batalla-plantel = "batalla.plantel:main"
batalla-combate = "batalla.combate:main"

[tool.hatch.build.targets.wheel]
packages = ["batalla"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
