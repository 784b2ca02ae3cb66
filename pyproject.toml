[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigin"
version = "0.1.0"
description = "A minimal 2D game engine on pygame with scenes, game objects, cached resources and a fixed-timestep game loop."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "engine", "2d", "pygame", "scene", "game-loop"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minigin = "minigin.main:main"

[tool.hatch.build.targets.wheel]
packages = ["minigin"]

[tool.pytest.ini_options]
addopts = "-ra"
