[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gokata"
version = "0.1.0"
description = "Small practice katas: sums, greetings, a dictionary, a wallet, shapes, a countdown and a concurrent website checker"
requires-python = ">=3.10"
dependencies = []
keywords = ["kata", "exercises", "testing", "dependency-injection", "mocking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gokata-countdown = "gokata.countdown:main"

[tool.hatch.build.targets.wheel]
packages = ["gokata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
