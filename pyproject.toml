[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fgkhuff"
version = "0.1.0"
description = "Adaptive Huffman (FGK) compression of files and byte strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["huffman", "adaptive", "fgk", "compression", "entropy coding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
fgkhuff = "fgkhuff.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fgkhuff"]

[tool.pytest.ini_options]
addopts = "-ra"
