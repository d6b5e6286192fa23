[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledman"
version = "0.1.0"
description = "A small maze-chasing arcade game for a 128x32 monochrome display"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "maze", "oled", "monochrome"]
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
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oledman = "oledman.app:main"

[tool.hatch.build.targets.wheel]
packages = ["oledman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
