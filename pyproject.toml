[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tourbot"
version = "0.1.0"
description = "Tour data model, service components and behaviour-tree leaves for a robot that guides visitors through points of interest"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "robotics",
    "behavior-tree",
    "tour-guide",
    "scheduler",
    "navigation",
    "blackboard",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tourbot"]

[tool.pytest.ini_options]
addopts = "-ra"
