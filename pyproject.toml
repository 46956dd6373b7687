[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "waykeypy"
version = "0.1.0"
description = "Keyboard state monitor for Linux evdev devices, publishing key states to a JSON file and a named pipe"
requires-python = ">=3.10"
keywords = ["keyboard", "evdev", "input", "monitoring", "wayland", "overlay"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
waykeypy = "waykeypy.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["waykeypy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
