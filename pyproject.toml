[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skyraid"
version = "0.1.0"
description = "A small vertical-scrolling shoot-'em-up with waves of enemies, special attacks and a pause menu."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "shooter", "arcade", "shmup", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
skyraid = "skyraid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["skyraid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
