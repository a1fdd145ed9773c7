[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xframe"
version = "0.1.0"
description = "Frame-level building blocks for small 2D/3D tools: JSON settings, frame timing, a Y-up camera, input state and immediate-mode debug line drawing."
requires-python = ">=3.10"
keywords = ["camera", "input", "debug-draw", "config", "timer", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["xframe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
