[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minitasks"
version = "0.1.0"
description = "A menu of small scheduling, sorting and data-cleaning tasks: finances, circus and festival line-ups, parades, scores, sensors, logs and patient queues"
requires-python = ">=3.10"
keywords = ["scheduling", "sorting", "data-cleaning", "demo", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Topic :: Utilities",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minitasks = "minitasks.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["minitasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
