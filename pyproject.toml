[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "salesbook"
version = "0.1.0"
description = "Terminal point-of-sale log for a small restaurant: per-kilo meals, meal boxes, drinks and sales reports"
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "restaurant", "sales", "report", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
salesbook = "salesbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["salesbook"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
