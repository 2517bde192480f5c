[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ggutil"
version = "1.0.0"
description = "Oracle GoldenGate multi-instance management tool"
requires-python = ">=3.10"
dependencies = [
    "tabulate",
]
keywords = ["goldengate", "ogg", "ggsci", "replication", "database", "monitoring"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ggutil = "ggutil.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ggutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
