[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tim"
version = "0.1.0"
description = "A small template manager: register files, directories and git repositories as named sources and copy them where you need them."
requires-python = ">=3.10"
dependencies = []
keywords = ["templates", "scaffolding", "cli", "git", "boilerplate"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tim = "tim.main:main"

[tool.hatch.build.targets.wheel]
packages = ["tim"]

[tool.pytest.ini_options]
addopts = "-ra"
