[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestsolutions"
version = "0.1.0"
description = "Solutions to competitive programming problems from Kick Start, Hash Code and Codeforces rounds"
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "algorithms", "codeforces", "kickstart", "hashcode"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestsolutions = "contestsolutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["contestsolutions"]

[tool.pytest.ini_options]
addopts = "-ra"
