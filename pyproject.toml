[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eksnode"
version = "0.1.0"
description = "Helpers for EKS cluster tooling: CIDR values, VPC subnet planning, status waiters, manifest loading and JSON/YAML/table output printers."
requires-python = ">=3.10"
keywords = ["eks", "kubernetes", "cidr", "vpc", "subnets", "manifests", "printers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["eksnode"]

[tool.hatch.build.targets.sdist]
include = ["eksnode", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
