[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkbridge"
version = "0.1.0"
description = "Relay bytes from a serial line or a TCP peer through a bounded ring buffer to standard output"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["serial", "tcp", "ring buffer", "bridge", "stream"]
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
    "Topic :: Terminals :: Serial",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
linkbridge = "linkbridge.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linkbridge"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
