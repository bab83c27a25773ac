[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "makejust"
version = "0.0.12"
description = "Extract build templates from a template folder into the current directory and run their install script"
requires-python = ">=3.10"
dependencies = []
keywords = ["make", "just", "justfile", "makefile", "template", "scaffolding"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
make-just = "makejust.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["makejust"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
