[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "olympia"
version = "0.1.0"
description = "Pipeline model data types for an out-of-order RISC-V core and a Dhrystone 2.1 benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["risc-v", "performance-model", "load-store", "flush", "dhrystone", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
olympia-dhrystone = "olympia.dhrystone:main"

[tool.hatch.build.targets.wheel]
packages = ["olympia"]

[tool.pytest.ini_options]
addopts = "-ra"
