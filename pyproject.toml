[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpamm"
version = "0.1.0"
description = "Constant-product AMM curve math, program-derived addresses and parameter validation"
requires-python = ">=3.10"
dependencies = []
keywords = ["amm", "liquidity", "pda", "pubkey", "base58", "defi", "fixed-point"]
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
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["cpamm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
