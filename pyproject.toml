[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "consoletoys"
version = "0.1.0"
description = "A handful of small interactive console games and calculators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "games",
    "console",
    "magic 8 ball",
    "rock paper scissors",
    "text adventure",
    "sorting hat",
    "whale talk",
    "leap year",
    "quadratic",
    "currency",
]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
magic-ball = "consoletoys.magic_ball:main"
currency = "consoletoys.currency:main"
leapyear = "consoletoys.leapyear:main"
quadratic = "consoletoys.quadratic:main"
rock-paper-scissors = "consoletoys.rock_paper_scissors:main"
whale = "consoletoys.whale:main"
sorting-hat = "consoletoys.sorting_hat:main"
adventure = "consoletoys.adventure:main"

[tool.hatch.build.targets.wheel]
packages = ["consoletoys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
