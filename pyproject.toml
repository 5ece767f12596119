[build-system]
requires = ["setuptools>=68"]
build-backend = "setuptools.build_meta"

[project]
name = "claudesquad"
version = "1.0.5"
description = "Configuration, state, help screens, key bindings and daemon control for running several AI coding agents side by side."
requires-python = ">=3.10"
dependencies = []
keywords = ["agents", "cli", "daemon", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
claudesquad = "claudesquad.cli:main"

[tool.setuptools.packages.find]
include = ["claudesquad*"]

[tool.pytest.ini_options]
addopts = "-ra"
