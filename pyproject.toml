[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "imsgdb"
version = "0.1.0"
description = "Parsers for iMessage payloads: app balloons, App Store and collaboration links, Digital Touch messages and expressives"
requires-python = ">=3.10"
dependencies = []
keywords = ["imessage", "messages", "plist", "protobuf", "digital touch", "chat"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["imsgdb"]

[tool.pytest.ini_options]
addopts = "-ra"
