[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "heliumapi"
version = "0.1.0"
description = "Async client for the Helium blockchain HTTP API: accounts, hotspots, blocks, oracle prices, OUIs, validators, chain variables and transactions."
requires-python = ">=3.10"
keywords = ["helium", "blockchain", "api", "client", "async", "hotspot", "lorawan"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "httpx>=0.24",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
    "pytest-asyncio>=0.21",
    "respx>=0.20",
]

[project.scripts]
heliumapi = "heliumapi.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["heliumapi"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
