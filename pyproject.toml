[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "getui"
version = "0.1.0"
description = "Client library for the Getui push notification REST API"
requires-python = ">=3.10"
dependencies = [
    "requests",
]
keywords = ["getui", "push", "notification", "rest", "sdk"]
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
    "Topic :: Communications",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
getui = "getui.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["getui"]

[tool.pytest.ini_options]
addopts = "-ra"
