[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pong"
version = "0.1.0"
description = "A walled Pong arena with computer-controlled paddles, drawn with pygame."
requires-python = ">=3.10"
keywords = ["pong", "game", "arcade", "pygame"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pong = "pong.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pong"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
