[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lcddino"
version = "0.1.0"
description = "Side-scrolling dinosaur runner for a simulated 16x2 character LCD and 4x3 keypad"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "dinosaur", "lcd", "keypad", "runner", "hd44780"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lcddino = "lcddino.main:main"
lcddino-senha = "lcddino.senha:main"

[tool.hatch.build.targets.wheel]
packages = ["lcddino"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
