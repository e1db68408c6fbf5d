[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "netwalk"
version = "0.1.0"
description = "Small TCP networking tools: address lookup, a greeting server and client, and a poll-based chat relay"
requires-python = ">=3.10"
dependencies = []
keywords = ["sockets", "tcp", "networking", "chat", "getaddrinfo", "selectors"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
netwalk-showip = "netwalk.show_ip:main"
netwalk-client = "netwalk.client:main"
netwalk-server = "netwalk.server:main"
netwalk-accept = "netwalk.accept:main"
netwalk-chat = "netwalk.chat:main"

[tool.hatch.build.targets.wheel]
packages = ["netwalk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
