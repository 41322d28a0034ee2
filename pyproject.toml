[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "core2d"
version = "0.1.0"
description = "A small 2D game toolkit on top of pygame: windows, camera, textures, text, audio, timers and collision helpers."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["2d", "game", "pygame", "camera", "collision", "sprites", "timer"]
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
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
core2d-demo = "core2d.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["core2d"]

[tool.pytest.ini_options]
addopts = "-ra"
