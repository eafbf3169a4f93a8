[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizbox"
version = "0.1.0"
description = "Create, edit and take timed multiple-choice quizzes stored as JSON, with a high-score table"
requires-python = ">=3.10"
dependencies = []
keywords = ["quiz", "test", "education", "json", "scoreboard"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quizbox = "quizbox.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizbox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
