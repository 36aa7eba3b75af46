[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "paintkit"
version = "0.1.0"
description = "A small vector paint program: shapes, affine transformations, selection, animation and saved drawings"
requires-python = ">=3.10"
dependencies = []
keywords = ["paint", "vector", "graphics", "affine", "transformations", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Editors :: Vector-Based",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
paintkit = "paintkit.app:main"

[tool.hatch.build.targets.wheel]
packages = ["paintkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
