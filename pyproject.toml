[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qbitclient"
version = "0.1.0"
description = "A small client for the qBittorrent WebUI API: application info, preferences, logs and sync data."
requires-python = ">=3.10"
dependencies = []
keywords = ["qbittorrent", "bittorrent", "torrent", "webui", "api", "client"]
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
    "Topic :: Communications :: File Sharing",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["qbitclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
