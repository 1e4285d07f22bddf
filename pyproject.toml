[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splendorui"
version = "0.1.0"
description = "Interface state for a Splendor board game: panels, option selectors, token pickers, player panels, leaderboard and XML printing, with no rendering"
requires-python = ">=3.10"
dependencies = []
keywords = ["splendor", "board game", "ui", "panels", "leaderboard", "xml"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["splendorui"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
