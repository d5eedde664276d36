[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kaptisto"
version = "0.1.0"
description = "Small command-line utilities: a hex dumper, a path remover and integer arithmetic helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["xxd", "hexdump", "rm", "utilities", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kaptisto-xxd = "kaptisto.xxd:main"
kaptisto-rm = "kaptisto.rm:main"

[tool.hatch.build.targets.wheel]
packages = ["kaptisto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
