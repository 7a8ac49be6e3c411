[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "digestkit"
version = "0.1.0"
description = "Hash text or files from the command line, with stored preferences and progress messages"
requires-python = ">=3.10"
dependencies = []
keywords = ["hash", "digest", "checksum", "md5", "sha256", "preferences"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
digestkit = "digestkit.opts:main"

[tool.setuptools]
packages = ["digestkit"]

[tool.pytest.ini_options]
addopts = "-ra"
