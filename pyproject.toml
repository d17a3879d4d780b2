[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netprefix"
version = "2.12.0"
description = "IPv4 and IPv6 network prefixes (CIDR): parsing, masks, host ranges, subnet enumeration and address arithmetic."
requires-python = ">=3.10"
dependencies = []
keywords = ["IP", "CIDR", "network", "prefix", "subnet"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["netprefix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
