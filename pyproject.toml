[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoclient"
version = "2.11.0"
description = "Client-side logic for an online courtroom drama role-playing game: settings, favourite servers, evidence, emotes and lobby text."
requires-python = ">=3.10"
dependencies = []
keywords = ["courtroom", "role-playing", "visual-novel", "settings", "evidence", "emotes"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aoclient"]

[tool.hatch.build.targets.sdist]
include = ["aoclient", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
