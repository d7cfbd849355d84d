[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catalogsync"
version = "0.1.0"
description = "Drift detection and synchronisation of metric definitions and scorecards against a Compass-style GraphQL catalog"
requires-python = ">=3.10"
dependencies = []
keywords = ["catalog", "scorecard", "metrics", "drift", "graphql", "compass"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Quality Assurance",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["catalogsync"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
