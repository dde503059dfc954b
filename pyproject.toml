[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sardips"
version = "0.1.0"
description = "Engine-free rules for a virtual pet game: ages, frame animation, wallets, pointer interaction, sprint physics, rhythm templates and a developer console."
requires-python = ">=3.10"
dependencies = []
keywords = ["virtual pet", "game", "simulation", "minigames", "rhythm game"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sardips"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
