[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskbot"
version = "0.1.0"
description = "Building blocks for a personal chat bot: Telegram data types, reply markup, keyword handling and CPU monitoring"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["telegram", "bot", "chat", "cpu", "monitoring"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Chat",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["deskbot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
