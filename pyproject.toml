[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "banklab"
version = "1.0.0"
description = "Accounts with explicit locking and fee-charging transfers between them"
requires-python = ">=3.10"
dependencies = []
keywords = ["banking", "accounts", "transactions", "locking"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["banklab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
