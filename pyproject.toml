[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficmon"
version = "1.0.0"
description = "Helpers for a network traffic monitor: value formatting, CPU usage, daily traffic history, month grids, adapter matching and hardware sensor readings."
requires-python = ">=3.10"
keywords = ["network", "traffic", "monitor", "cpu", "bandwidth", "history", "sensors", "calendar"]
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
    "Topic :: System :: Networking :: Monitoring",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["trafficmon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
