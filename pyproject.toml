[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "comlab"
version = "0.1.0"
description = "Reference-counted components with interface queries, and clients that create and exercise them"
requires-python = ">=3.10"
dependencies = []
keywords = ["components", "interfaces", "reference counting", "query interface", "object model"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Object Brokering",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
comlab-client = "comlab.client:main"

[tool.hatch.build.targets.wheel]
packages = ["comlab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
