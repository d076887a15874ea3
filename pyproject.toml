[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spritesmith"
version = "0.1.0"
description = "Layered, animated pixel sprites with undoable edits and JSON project files"
requires-python = ">=3.10"
dependencies = []
keywords = ["sprite", "pixel-art", "animation", "layers", "undo", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Raster-Based",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spritesmith"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
