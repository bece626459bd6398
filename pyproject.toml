[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "powercheck"
version = "0.1.0"
description = "A small always-on-top battery indicator with shutdown and suspend buttons"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["battery", "power", "indicator", "shutdown", "suspend", "opengl"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Power (UPS)",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
powercheck = "powercheck.app:main"

[tool.hatch.build.targets.wheel]
packages = ["powercheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
