[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpusched"
version = "0.1.0"
description = "CPU scheduling simulator: preemptive SJF, RR with priority, MLFQ and priority SJF with aging"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "scheduling",
    "cpu",
    "operating-systems",
    "simulation",
    "sjf",
    "round-robin",
    "mlfq",
    "gantt",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpusched = "cpusched.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cpusched"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
