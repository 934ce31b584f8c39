[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "antman"
version = "0.1.0"
description = "A small file compressor: word deduplication, plain-text PPM value packing and Huffman coding, with a matching expander."
requires-python = ">=3.10"
dependencies = []
keywords = ["compression", "huffman", "archiving", "ppm", "dictionary"]
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
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
antman = "antman.cli:antman_main"
giantman = "antman.cli:giantman_main"

[tool.hatch.build.targets.wheel]
packages = ["antman"]

[tool.pytest.ini_options]
addopts = "-ra"
