[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "surfcad"
version = "0.1.0"
description = "Building blocks for a surface modeller: bounding boxes, Bezier basis, rectangle packing and a text-edit engine with undo"
requires-python = ">=3.10"
dependencies = []
keywords = ["geometry", "bounding-box", "bezier", "rectangle-packing", "texture-atlas", "text-editing", "undo"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Text Editors :: Text Processing",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["surfcad"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
