[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "infrakit"
version = "0.1.0"
description = "Infrastructure helpers: command-line parsing, callback logging, files, strings, timing, RGBA images, IP addresses, TCP sockets, system and process utilities."
requires-python = ">=3.10"
keywords = ["utilities", "command-line", "logging", "sockets", "tcp", "image", "process", "system"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = [
    "pillow",
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["infrakit"]

[tool.pytest.ini_options]
addopts = "-ra"
