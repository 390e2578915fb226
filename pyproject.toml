[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "amazingcore"
version = "0.1.0"
description = "Game server core library: wire data types, error helpers, SQLite-backed asset and name services, and asset cache tools."
requires-python = ">=3.11"
keywords = ["game server", "protocol", "sqlite", "asset cache", "blob storage"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]
dependencies = [
    "humanize",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
amazingcore-depot-downloader = "amazingcore.depot:main"
amazingcore-cache-importer = "amazingcore.cache_importer:main"
amazingcore-cache-analyzer = "amazingcore.cache_analyzer:main"

[tool.hatch.build.targets.wheel]
packages = ["amazingcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
